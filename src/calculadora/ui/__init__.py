"""
Módulo de interfaz de usuario.
Contiene el renderizador de display y botonera.
"""

from .renderer import UIRenderer

__all__ = ['UIRenderer']
