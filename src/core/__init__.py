"""Core del cliente: configuración, dominio, contratos y errores.

El core no hace I/O de red; los adaptadores dependen de él, nunca al revés.
"""
