"""
Configuración centralizada de la calculadora.

Este módulo contiene las preferencias de ventana, voz y comportamiento que
comparten el acumulador, el renderizador y la aplicación.
"""

# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Preferencias de la calculadora
# Responsabilidades:
#   - Almacenar preferencias de voz (volumen, velocidad, idioma)
#   - Definir geometría de la ventana y la botonera
#   - Configurar la política del acumulador y las teclas de control
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora.

    Opciones disponibles:
        - Feedback por voz configurable (volumen, velocidad, idioma)
        - Tamaño de botones y display
        - Política de confirmación del acumulador y precisión exponencial
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = True           # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)
        self.voice_language = 'es'          # Idioma ('es', 'en', etc.)

        # ====================================================================
        # VENTANA Y BOTONERA
        # ====================================================================
        self.window_title = "calculadora"
        self.button_width = 90              # Píxeles por columna
        self.button_height = 70             # Píxeles por fila
        self.display_height = 90            # Alto del display
        self.margin = 5                     # Separación entre botones

        # ====================================================================
        # COMPORTAMIENTO
        # ====================================================================
        self.exponent_precision = 6         # Dígitos de mantisa en notación exponencial
        self.commit_without_operator = True # Número tecleado sin operador reemplaza al resultado
        self.quit_keys = (27, ord('Q'))     # ESC o 'Q' para salir
        self.voice_toggle_key = ord('v')    # Activar/desactivar voz
        self.feedback_duration = 30         # Frames que dura un mensaje de feedback
        self.frame_delay_ms = 30            # Espera de cv2.waitKey por frame

    def get_window_size(self, rows=5, cols=4):
        """
        Calcula el tamaño de la ventana a partir de la botonera.

        Args:
            rows (int): Filas de botones
            cols (int): Columnas de botones

        Returns:
            tuple: (ancho, alto) en píxeles
        """
        width = cols * self.button_width + self.margin
        height = self.display_height + rows * self.button_height + self.margin
        return width, height
