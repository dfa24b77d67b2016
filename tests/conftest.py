import pytest
import pyttsx3

from calculadora.app.calculator_app import CalculatorApp
from calculadora.config.settings import CalculatorConfig
from calculadora.voice import feedback


class FakeVoice:
    def __init__(self, id, name, languages=()):
        self.id = id
        self.name = name
        self.languages = list(languages)


class FakeEngine:
    """Sustituto de pyttsx3 que registra lo que se habría dicho."""

    def __init__(self, voices=()):
        self.voices = list(voices)
        self.properties = {}
        self.spoken = []

    def setProperty(self, name, value):
        self.properties[name] = value

    def getProperty(self, name):
        if name == 'voices':
            return self.voices
        return self.properties.get(name)

    def say(self, text):
        self.spoken.append(text)

    def runAndWait(self):
        pass


class InlineThread:
    """Ejecuta el hilo de voz en el momento de start()."""

    def __init__(self, target, daemon=None):
        self.target = target

    def start(self):
        self.target()


@pytest.fixture
def fake_engine(monkeypatch):
    engine = FakeEngine()
    monkeypatch.setattr(pyttsx3, "init", lambda: engine)
    monkeypatch.setattr(feedback.threading, "Thread", InlineThread)
    return engine


@pytest.fixture
def config():
    config = CalculatorConfig()
    config.voice_enabled = False
    return config


@pytest.fixture
def app(config):
    return CalculatorApp(config)
