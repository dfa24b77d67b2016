"""
Módulo de configuración de la calculadora.
Contiene las preferencias de ventana, voz y comportamiento.
"""

from .settings import CalculatorConfig

__all__ = ['CalculatorConfig']
