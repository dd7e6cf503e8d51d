"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Las funciones de recursos dependen del contrato, no de un cliente global.
"""
