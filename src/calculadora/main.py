"""
Punto de entrada de la calculadora.

Ejecución:
    calculadora [--sin-voz] [--estricto] [--precision N]
    python -m calculadora
"""

import argparse
import traceback

from calculadora.app.calculator_app import CalculatorApp
from calculadora.config.settings import CalculatorConfig


def build_config(argv=None):
    """
    Construye la configuración a partir de la línea de comandos.

    Args:
        argv (list): Argumentos (por defecto sys.argv[1:])

    Returns:
        CalculatorConfig: Configuración con las opciones aplicadas
    """
    parser = argparse.ArgumentParser(prog="calculadora",
                                     description="Calculadora de escritorio")
    parser.add_argument("--sin-voz", action="store_true",
                        help="desactiva el feedback por voz")
    parser.add_argument("--estricto", action="store_true",
                        help="ignora números tecleados sin operador pendiente")
    parser.add_argument("--precision", type=int, default=6,
                        help="dígitos de mantisa en notación exponencial")
    args = parser.parse_args(argv)

    config = CalculatorConfig()
    config.voice_enabled = not args.sin_voz
    config.commit_without_operator = not args.estricto
    config.exponent_precision = args.precision
    return config


def main(argv=None):
    """
    Punto de entrada de la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Muestra el error y el traceback
    """
    config = build_config(argv)
    try:
        app = CalculatorApp(config)
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
