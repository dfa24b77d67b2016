"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja el display y la botonera
sobre un lienzo de numpy usando OpenCV.
"""

import cv2
import numpy as np

from calculadora.config.settings import CalculatorConfig
from calculadora.core.commands import BUTTON_LAYOUT, GRID_COLS, GRID_ROWS, OPERATION_IDS


# Las fuentes Hershey de OpenCV solo dibujan ASCII
_ASCII_LABELS = {"±": "+/-", "÷": "/", "×": "x"}

# Colores BGR por tipo de botón
_DIGIT_COLOR = (70, 70, 70)
_OPERATOR_COLOR = (0, 150, 255)
_FUNCTION_COLOR = (160, 160, 160)
_PRESSED_COLOR = (230, 230, 230)


# ============================================================================
class UIRenderer:
    """
    Renderizador de la calculadora.

    Componentes visuales:
        1. Display: texto del acumulador alineado a la derecha
        2. Botonera: cuadrícula de 5x4 con AC, ±, %, operadores y dígitos
        3. Feedback: mensajes temporales (ej: errores) con fade-out
    """

    def __init__(self, config=None):
        """
        Inicializa el renderizador.

        Args:
            config (CalculatorConfig): Configuración (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.width, self.height = self.config.get_window_size(GRID_ROWS, GRID_COLS)
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)    # Color del feedback

    def new_frame(self):
        """Lienzo vacío del tamaño de la ventana."""
        return np.full((self.height, self.width, 3), 30, dtype=np.uint8)

    def button_rect(self, row, col, colspan=1):
        """
        Rectángulo de un botón de la cuadrícula.

        Returns:
            tuple: (x0, y0, x1, y1) en píxeles
        """
        c = self.config
        x0 = c.margin + col * c.button_width
        y0 = c.display_height + row * c.button_height + c.margin
        x1 = (col + colspan) * c.button_width
        y1 = c.display_height + (row + 1) * c.button_height
        return x0, y0, x1, y1

    def button_at(self, x, y):
        """
        Busca el botón bajo un punto (clic del ratón).

        Args:
            x (int): Coordenada horizontal
            y (int): Coordenada vertical

        Returns:
            str | None: ID de comando del botón, o None si el punto cae en el
            display o entre botones
        """
        for _, gid, row, col, span in BUTTON_LAYOUT:
            x0, y0, x1, y1 = self.button_rect(row, col, span)
            if x0 <= x <= x1 and y0 <= y <= y1:
                return gid
        return None

    def show_feedback(self, msg, color=(0, 255, 0), duration=None):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames (por defecto config.feedback_duration)
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration if duration is not None else self.config.feedback_duration

    def draw_display(self, img, text, is_result=False):
        """
        Dibuja el display con el texto alineado a la derecha.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            text (str): Texto del acumulador
            is_result (bool): True si el texto es un resultado confirmado

        Colores del display:
            - Blanco: Número en curso
            - Verde: Resultado
            - Rojo: inf/nan

        La fuente se reduce hasta que el texto cabe en el ancho disponible.
        """
        c = self.config
        x0, y0 = c.margin, c.margin
        x1, y1 = self.width - c.margin, c.display_height - c.margin
        cv2.rectangle(img, (x0, y0), (x1, y1), (15, 15, 15), -1)

        if not text:
            return

        color = (255, 255, 255)
        if text.lstrip("-") in ("inf", "nan"):
            color = (100, 100, 255)
        elif is_result:
            color = (100, 255, 100)

        available = (x1 - x0) - 20
        font_scale = 1.6
        text_w, text_h = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, font_scale, 2)[0]
        while text_w > available and font_scale > 0.4:
            font_scale -= 0.1
            text_w, text_h = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, font_scale, 2)[0]

        org = (x1 - 10 - text_w, (y0 + y1 + text_h) // 2)
        cv2.putText(img, text, org, cv2.FONT_HERSHEY_DUPLEX, font_scale, color, 2)

    def draw_buttons(self, img, pressed=None):
        """
        Dibuja la botonera.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            pressed (str): ID del último botón pulsado (se resalta)
        """
        for label, gid, row, col, span in BUTTON_LAYOUT:
            x0, y0, x1, y1 = self.button_rect(row, col, span)

            if gid == pressed:
                bg, fg = _PRESSED_COLOR, (0, 0, 0)
            elif gid in OPERATION_IDS or gid == "equal":
                bg, fg = _OPERATOR_COLOR, (255, 255, 255)
            elif gid.startswith("num_") or gid == "decimal":
                bg, fg = _DIGIT_COLOR, (255, 255, 255)
            else:
                bg, fg = _FUNCTION_COLOR, (0, 0, 0)

            cv2.rectangle(img, (x0, y0), (x1, y1), bg, -1)

            text = _ASCII_LABELS.get(label, label)
            text_w, text_h = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, 0.9, 2)[0]
            org = ((x0 + x1 - text_w) // 2, (y0 + y1 + text_h) // 2)
            cv2.putText(img, text, org, cv2.FONT_HERSHEY_SIMPLEX, 0.9, fg, 2)

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal sobre el display.

        Efecto:
            - Desaparece con fade-out usando alpha blending
            - Duración controlada por feedback_timer
        """
        if self.feedback_timer > 0:
            self.feedback_timer -= 1
            # Calcular alpha para fade-out suave
            alpha = min(self.feedback_timer / 10.0, 1.0)

            color = tuple(int(ch * alpha) for ch in self.feedback_color)
            cv2.putText(img, self.feedback_msg, (self.config.margin + 10, 28),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.6, color, 1)
