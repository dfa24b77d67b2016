"""
Acumulador aritmético de la calculadora.

Este módulo contiene la clase Accumulator, la máquina de estados que recibe
los comandos de la botonera/teclado y produce el texto del display.
"""

import re

import numpy as np

from .commands import Operation
from .errors import InvalidInputError


# Dígitos con como mucho un punto decimal, sin signo ni exponente
_NUMBER_RE = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")


def format_number(value, precision=6):
    """
    Formatea un resultado con la representación más corta.

    Args:
        value (float): Valor a mostrar
        precision (int): Dígitos de mantisa de la forma exponencial

    Returns:
        str: La más corta entre la forma posicional y la exponencial

    Ejemplos:
        8.0 → "8"
        0.09 → "0.09"
        1e20 → "1.000000e+20"
        1/3 → "3.333333e-01"
        7/0 → "inf"

    En caso de empate gana la forma posicional.
    """
    plain = np.format_float_positional(value, trim="-")
    exp = f"{value:.{precision}e}"
    return exp if len(exp) < len(plain) else plain


# ============================================================================
# CLASE: Accumulator
# Propósito: Máquina de estados aritmética de la calculadora
# Responsabilidades:
#   - Acumular dígitos del número en curso (pending_input)
#   - Aplicar la operación pendiente al confirmar un operando
#   - Gestionar signo diferido, porcentaje y punto decimal
#   - Formatear el texto del display
# ============================================================================
class Accumulator:
    """
    Acumulador con operación pendiente de un solo uso.

    Modelo de operación:
        1. Usuario teclea dígitos → se acumulan en pending_input
        2. Usuario pulsa operador → se evalúa lo pendiente y se guarda el operador
        3. Usuario teclea el segundo operando
        4. Usuario pulsa = (o otro operador) → current = current OP operando

    Variables de estado:
        - current: Último resultado confirmado (None si aún no hay ninguno)
        - pending_input: Dígitos y punto del número en curso
        - negate_pending: Signo diferido, se aplica una vez al confirmar
        - operator: Operation pendiente (None si no hay)
        - commit_without_operator: Si False, un número tecleado sin operador
          pendiente con current ya presente se descarta
        - precision: Dígitos de mantisa del formato exponencial
    """

    def __init__(self, commit_without_operator=True, precision=6):
        """Inicializa el acumulador en estado vacío."""
        self.commit_without_operator = commit_without_operator
        self.precision = precision
        self.clear()

    def __repr__(self):
        return (f"Accumulator(current={self.current!r}, "
                f"pending_input={self.pending_input!r}, "
                f"negate_pending={self.negate_pending!r}, "
                f"operator={self.operator!r})")

    def clear(self):
        """Vuelve al estado inicial (AC)."""
        self.current = None
        self.pending_input = ""
        self.negate_pending = False
        self.operator = None

    def digit(self, d):
        """
        Añade un dígito al número en curso.

        Args:
            d (str | int): Dígito 0-9

        Raises:
            InvalidInputError: Si d no es un único dígito decimal
        """
        d = str(d)
        if len(d) != 1 or d not in "0123456789":
            raise InvalidInputError(f"No es un dígito: {d!r}")
        self.pending_input += d

    def decimal_point(self):
        """Añade el punto decimal; no hace nada si ya hay uno."""
        if "." not in self.pending_input:
            self.pending_input += "."

    def operator_pressed(self, op):
        """
        Confirma lo pendiente y deja op en cola.

        Args:
            op (Operation): Operación a aplicar con el siguiente operando
        """
        self.evaluate()
        self.operator = Operation(op)

    def equals(self):
        self.evaluate()

    def toggle_sign(self):
        """Invierte el signo diferido (±)."""
        self.negate_pending = not self.negate_pending

    def percent(self):
        """Confirma lo pendiente y divide el resultado entre 100."""
        self.evaluate()
        if self.current is not None:
            self.current /= 100

    def evaluate(self):
        """
        Consume el número en curso y aplica la operación pendiente.

        Proceso:
            1. Operando: 0.0 si no hay entrada; si la hay, se parsea, se aplica
               el signo diferido (una sola vez) y se vacía el búfer
            2. Sin current o sin operador: el operando pasa a ser current
               (solo si había entrada)
            3. Con current y operador: current = current OP operando
            4. El operador se consume siempre

        Raises:
            InvalidInputError: Si el búfer no es un número. El estado no se
            modifica en ese caso.
        """
        had_input = bool(self.pending_input)
        operand = self._take_operand()
        op, self.operator = self.operator, None

        if self.current is None or op is None:
            if had_input and (self.current is None or self.commit_without_operator):
                self.current = operand
        else:
            self.current = op.apply(self.current, operand)

    def _take_operand(self):
        if not self.pending_input:
            return 0.0

        if not _NUMBER_RE.fullmatch(self.pending_input):
            raise InvalidInputError(
                f"No se puede interpretar como número: {self.pending_input!r}")

        value = float(self.pending_input)
        if self.negate_pending:
            value = -value
            self.negate_pending = False
        self.pending_input = ""
        return value

    def render(self):
        """
        Texto a mostrar en el display.

        Returns:
            str: Número en curso (con "-" si hay signo diferido), o el
            resultado formateado, o "" si no hay nada

        Prioridad:
            1. Número en curso siendo tecleado
            2. Resultado confirmado
            3. Cadena vacía
        """
        if self.pending_input:
            if self.negate_pending:
                return "-" + self.pending_input
            return self.pending_input
        if self.current is not None:
            return format_number(self.current, self.precision)
        return ""
