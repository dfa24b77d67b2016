"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para feedback auditivo,
ejecutándose de forma asíncrona para no bloquear la interfaz.
"""

import threading
import pyttsx3
from collections import deque


NUMBERS_ES = {
    "0": "cero", "1": "uno", "2": "dos", "3": "tres", "4": "cuatro",
    "5": "cinco", "6": "seis", "7": "siete", "8": "ocho", "9": "nueve"
}

OPERATIONS_ES = {
    "+": "más",
    "-": "menos",
    "*": "por",
    "/": "dividido",
}

SPECIAL_VALUES_ES = {
    "inf": "infinito",
    "-inf": "menos infinito",
    "nan": "no es un número",
}


def result_to_speech(result):
    """
    Convierte el texto del display en una frase pronunciable.

    Args:
        result (str): Texto del display (ej: "-4.5", "1.000000e+20", "inf")

    Returns:
        str: Frase en español (ej: "menos 4 coma 5")
    """
    if result in SPECIAL_VALUES_ES:
        return SPECIAL_VALUES_ES[result]

    text = result
    prefix = ""
    if text.startswith("-"):
        prefix, text = "menos ", text[1:]

    mantissa, _, exponent = text.partition("e")
    spoken = mantissa.replace(".", " coma ").strip()
    if exponent:
        sign = "menos " if exponent.startswith("-") else ""
        spoken += f" por diez elevado a {sign}{int(exponent.lstrip('+-'))}"
    return prefix + spoken


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Sintetizar texto a voz en español
#   - Ejecutar en hilo separado para no bloquear UI
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la aplicación)
        - Cola de mensajes (un mensaje a la vez)
        - Motor inicializado al primer uso si la voz arranca desactivada
    """

    def __init__(self, config):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (CalculatorConfig): Configuración de la calculadora
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)  # Cola de máximo 5 mensajes
        self._lock = threading.Lock()

        if self.config.voice_enabled:
            self._init_engine()

    def _init_engine(self):
        try:
            self.engine = pyttsx3.init()
            self._configure_engine()
            print("✓ Sistema de voz inicializado correctamente")
        except Exception as e:
            print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
            self.engine = None
            self.config.voice_enabled = False

    def _configure_engine(self):
        """
        Configura el motor de voz con las preferencias del usuario.
        Busca una voz del idioma configurado; si no hay, usa la predeterminada.
        """
        try:
            self.engine.setProperty('volume', self.config.voice_volume)
            self.engine.setProperty('rate', self.config.voice_rate)

            lang = self.config.voice_language.lower()
            for voice in self.engine.getProperty('voices'):
                languages = [
                    code.decode(errors='ignore') if isinstance(code, bytes) else str(code)
                    for code in (getattr(voice, 'languages', None) or [])
                ]
                voice_id_lower = voice.id.lower()
                if (any(code.lower().lstrip('\x05').startswith(lang) for code in languages)
                        or f"{lang}-" in voice_id_lower or f"{lang}_" in voice_id_lower):
                    self.engine.setProperty('voice', voice.id)
                    print(f"✓ Voz en '{lang}': {voice.name}")
                    return

            print(f"⚠ No se encontró voz en '{lang}'. Usando voz predeterminada.")
        except Exception as e:
            print(f"⚠ Error al configurar voz: {e}")

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar

        Ejecución:
            - Si no hay mensajes pendientes: Reproduce inmediatamente
            - Si hay mensajes: Añade a la cola (descarta el más antiguo si está llena)
        """
        if not self.config.voice_enabled:
            return
        if not self.engine:
            self._init_engine()
            if not self.engine:
                return

        with self._lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True

        thread = threading.Thread(target=self._process_queue, daemon=True)
        thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            with self._lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

    def speak_number(self, digit):
        """
        Reproduce un dígito en español.

        Args:
            digit (str | int): Dígito del 0 al 9
        """
        self.speak(NUMBERS_ES.get(str(digit), str(digit)))

    def speak_operation(self, operation):
        """
        Reproduce el nombre de una operación matemática en español.

        Args:
            operation (str): Operador matemático (+, -, *, /)
        """
        self.speak(OPERATIONS_ES.get(operation, operation))

    def speak_result(self, result):
        """Reproduce "igual a X" con el texto del display."""
        self.speak(f"igual a {result_to_speech(result)}")
