"""
Módulo core con la lógica principal de la calculadora.
Contiene el acumulador, el vocabulario de comandos y sus excepciones.
"""

from .accumulator import Accumulator, format_number
from .commands import Operation, apply_command, command_for_key
from .errors import CalculatorError, InvalidInputError

__all__ = ['Accumulator', 'format_number', 'Operation', 'apply_command',
           'command_for_key', 'CalculatorError', 'InvalidInputError']
