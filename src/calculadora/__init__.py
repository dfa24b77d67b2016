"""
Calculadora de escritorio con botonera y teclado.

Paquetes:
    - core: Acumulador aritmético y comandos
    - config: Configuración
    - ui: Renderizado con OpenCV
    - voice: Feedback por voz
    - app: Aplicación que integra todo
"""

__version__ = "1.0.0"
