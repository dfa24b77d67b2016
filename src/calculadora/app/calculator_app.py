"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import cv2
from calculadora.core.accumulator import Accumulator
from calculadora.core.commands import (
    DIGIT_PREFIX, OPERATION_IDS, apply_command, command_for_key,
)
from calculadora.core.errors import InvalidInputError
from calculadora.ui.renderer import UIRenderer
from calculadora.voice.feedback import VoiceFeedback
from calculadora.config.settings import CalculatorConfig


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - Accumulator: Lógica aritmética y estado (propiedad exclusiva de la app)
        - UIRenderer: Renderizado de display y botonera
        - VoiceFeedback: Feedback por voz
        - CalculatorApp: Despachador de comandos y loop principal

    Los callbacks de ratón y teclado solo envían IDs de comando a process();
    ningún otro componente modifica el acumulador.
    """

    def __init__(self, config=None):
        """
        Inicializa la aplicación.

        Args:
            config (CalculatorConfig): Configuración (opcional)
        """
        self.config = config if config else CalculatorConfig()

        # Inicializar componentes principales
        self.acc = Accumulator(
            commit_without_operator=self.config.commit_without_operator,
            precision=self.config.exponent_precision,
        )
        self.ui = UIRenderer(self.config)
        self.voice = VoiceFeedback(self.config)

        self.display = ""               # Texto actual del display
        self.last_pressed = None        # Último comando (resaltado en la botonera)
        self.press_timer = 0            # Frames restantes de resaltado
        self.press_time = 5

        if not self.config.commit_without_operator:
            print("✓ Modo estricto: se ignoran números sin operador pendiente")

    def process(self, gid):
        """
        Ejecuta un comando y actualiza el display.

        Args:
            gid (str): ID del comando (ej: "num_5", "add", "equal")

        Returns:
            str: Nuevo texto del display

        Errores:
            Un InvalidInputError (ej: "." seguido de "=") no detiene la
            aplicación: se avisa por consola, se muestra "Error" y se reinicia
            el acumulador.
        """
        self.last_pressed = gid
        self.press_timer = self.press_time

        try:
            apply_command(self.acc, gid)
        except InvalidInputError as e:
            print(f"⚠ Entrada no válida: {e}")
            self.acc.clear()
            self.display = self.acc.render()
            self.ui.show_feedback("Error", (100, 100, 255))
            self.voice.speak("error")
            return self.display

        self.display = self.acc.render()
        self._announce(gid)
        return self.display

    def _announce(self, gid):
        # ====================================================================
        # NÚMEROS (0-9) y punto decimal
        # ====================================================================
        if gid.startswith(DIGIT_PREFIX):
            self.voice.speak_number(gid[len(DIGIT_PREFIX):])
        elif gid == "decimal":
            self.voice.speak("coma")

        # ====================================================================
        # OPERADORES (+ - × ÷)
        # ====================================================================
        elif gid in OPERATION_IDS:
            self.voice.speak_operation(OPERATION_IDS[gid].value)

        # ====================================================================
        # IGUAL (=) y PORCENTAJE (%): anunciar resultado
        # ====================================================================
        elif gid in ("equal", "percent"):
            if self.display:
                self.voice.speak_result(self.display)

        # ====================================================================
        # BORRAR TODO (AC) y CAMBIO DE SIGNO (±)
        # ====================================================================
        elif gid == "clear_all":
            self.ui.show_feedback("TODO BORRADO", (255, 200, 0))
            self.voice.speak("todo borrado")
        elif gid == "invert":
            self.voice.speak("cambio de signo")

    def handle_key(self, key):
        """
        Procesa una tecla leída con cv2.waitKey.

        Args:
            key (int): Código de tecla (ya enmascarado con 0xFF)

        Returns:
            bool: False si hay que salir, True para continuar
        """
        if key in self.config.quit_keys:
            return False

        if key == self.config.voice_toggle_key:
            self.toggle_voice()
            return True

        gid = command_for_key(chr(key))
        if gid:
            self.process(gid)
        return True

    def handle_click(self, x, y):
        """
        Procesa un clic en la ventana.

        Returns:
            str | None: ID del botón pulsado, o None si no había botón
        """
        gid = self.ui.button_at(x, y)
        if gid:
            self.process(gid)
        return gid

    def toggle_voice(self):
        """Activa/desactiva el feedback por voz."""
        self.config.voice_enabled = not self.config.voice_enabled
        status = "ACTIVADA" if self.config.voice_enabled else "DESACTIVADA"
        print(f"🔊 Voz: {status}")
        self.ui.show_feedback(f"VOZ {status}", (0, 255, 255))
        if self.config.voice_enabled:
            self.voice.speak("voz activada")

    def _on_mouse(self, event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONDOWN:
            self.handle_click(x, y)

    def draw(self):
        """
        Dibuja el frame completo.

        Returns:
            np.array: Imagen BGR con display, botonera y feedback
        """
        frame = self.ui.new_frame()
        is_result = not self.acc.pending_input and self.acc.current is not None
        self.ui.draw_display(frame, self.display, is_result)

        pressed = self.last_pressed if self.press_timer > 0 else None
        self.ui.draw_buttons(frame, pressed)
        if self.press_timer > 0:
            self.press_timer -= 1

        self.ui.draw_feedback(frame)
        return frame

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Dibujar display y botonera
            2. Mostrar frame
            3. Procesar teclado (los clics llegan por el callback de ratón)
            4. Repetir hasta ESC, 'Q' o cerrar la ventana
        """
        title = self.config.window_title

        print("\n" + "="*50)
        print("CALCULADORA")
        print("="*50)
        print("\nNumeros: 0-9 y '.'")
        print("Operaciones: + - * /")
        print("Calcular: '=' o Enter")
        print("Borrar todo: espacio o tabulador")
        print("Cambio de signo: 'i'   Porcentaje: 'p'")
        print("\nPresiona ESC o 'Q' para salir")
        print("Presiona 'v' para activar/desactivar voz")
        print("="*50 + "\n")

        cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(title, self._on_mouse)

        try:
            while True:
                cv2.imshow(title, self.draw())

                key = cv2.waitKey(self.config.frame_delay_ms)
                if cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                    break
                if key != -1 and not self.handle_key(key & 0xFF):
                    break
        finally:
            cv2.destroyAllWindows()
            print("\nOK Aplicacion cerrada correctamente")
