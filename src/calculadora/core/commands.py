"""
Vocabulario de comandos de la calculadora.

Este módulo define las operaciones binarias, los identificadores de comando
que envía la interfaz y el mapeo de teclas a comandos.
"""

import math
import operator
from enum import Enum

from .errors import InvalidInputError


# ============================================================================
# ENUM: Operation
# Propósito: Operadores binarios pendientes del acumulador
# ============================================================================
class Operation(Enum):
    """Operación binaria en cola, identificada por su símbolo de teclado."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def label(self):
        """Símbolo mostrado en la botonera."""
        return {"*": "×", "/": "÷"}.get(self.value, self.value)

    def apply(self, a, b):
        """
        Aplica la operación a dos floats con semántica IEEE-754.

        Python lanza ZeroDivisionError al dividir floats por cero; aquí se
        devuelve el valor IEEE correspondiente (±inf o nan).
        """
        if self is Operation.DIVIDE and b == 0.0:
            if a == 0.0 or math.isnan(a):
                return math.nan
            return math.copysign(math.inf, a) * math.copysign(1.0, b)
        return _FUNCTIONS[self](a, b)


_FUNCTIONS = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: operator.truediv,
}


# ============================================================================
# IDENTIFICADORES DE COMANDO
# La interfaz solo conoce estos IDs; nunca toca el acumulador directamente
# ============================================================================
DIGIT_PREFIX = "num_"

OPERATION_IDS = {
    "add": Operation.ADD,
    "subtract": Operation.SUBTRACT,
    "multiply": Operation.MULTIPLY,
    "divide": Operation.DIVIDE,
}

COMMAND_IDS = (
    [DIGIT_PREFIX + str(d) for d in range(10)]
    + ["decimal"]
    + list(OPERATION_IDS)
    + ["equal", "clear_all", "invert", "percent"]
)

# Teclas reconocidas (carácter Unicode ya resuelto por la capa gráfica)
KEY_BINDINGS = {
    ".": "decimal",
    "+": "add",
    "-": "subtract",
    "*": "multiply",
    "/": "divide",
    " ": "clear_all",
    "\t": "clear_all",
    "i": "invert",
    "p": "percent",
    "=": "equal",
    "\r": "equal",
    "\n": "equal",
}

# Botonera: (etiqueta, id, fila, columna, columnas que ocupa)
BUTTON_LAYOUT = [
    ("AC", "clear_all", 0, 0, 1),
    ("±", "invert", 0, 1, 1),
    ("%", "percent", 0, 2, 1),
    ("÷", "divide", 0, 3, 1),
    ("7", "num_7", 1, 0, 1),
    ("8", "num_8", 1, 1, 1),
    ("9", "num_9", 1, 2, 1),
    ("×", "multiply", 1, 3, 1),
    ("4", "num_4", 2, 0, 1),
    ("5", "num_5", 2, 1, 1),
    ("6", "num_6", 2, 2, 1),
    ("-", "subtract", 2, 3, 1),
    ("1", "num_1", 3, 0, 1),
    ("2", "num_2", 3, 1, 1),
    ("3", "num_3", 3, 2, 1),
    ("+", "add", 3, 3, 1),
    ("0", "num_0", 4, 0, 2),
    (".", "decimal", 4, 2, 1),
    ("=", "equal", 4, 3, 1),
]

GRID_ROWS = 5
GRID_COLS = 4


def command_for_key(char):
    """
    Traduce un carácter de teclado a un ID de comando.

    Args:
        char (str): Carácter ya decodificado (ej: "7", "+", " ")

    Returns:
        str | None: ID de comando, o None si la tecla no es de la calculadora
    """
    if len(char) == 1 and char.isdigit() and char.isascii():
        return DIGIT_PREFIX + char
    return KEY_BINDINGS.get(char)


def apply_command(acc, gid):
    """
    Ejecuta un ID de comando sobre el acumulador.

    Args:
        acc (Accumulator): Acumulador destino
        gid (str): ID de comando (ej: "num_5", "add", "equal")

    Raises:
        InvalidInputError: Si el ID no existe o el búfer no es un número
    """
    if gid.startswith(DIGIT_PREFIX):
        acc.digit(gid[len(DIGIT_PREFIX):])
    elif gid in OPERATION_IDS:
        acc.operator_pressed(OPERATION_IDS[gid])
    elif gid == "decimal":
        acc.decimal_point()
    elif gid == "equal":
        acc.equals()
    elif gid == "clear_all":
        acc.clear()
    elif gid == "invert":
        acc.toggle_sign()
    elif gid == "percent":
        acc.percent()
    else:
        raise InvalidInputError(f"Comando desconocido: {gid!r}")
