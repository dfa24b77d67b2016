"""Excepciones de la lógica de calculadora."""


class CalculatorError(Exception):
    """Error base de la calculadora."""


class InvalidInputError(CalculatorError, ValueError):
    """
    El búfer de entrada no es un número válido.

    Solo es alcanzable por un comando mal formado (ej: "." seguido de "=");
    la aplicación la captura y reinicia el acumulador.
    """
