import pytest

from clients import llm, ollama_client
from clients.gemini_client import GeminiClient
from clients.ollama_client import OllamaClient
from utils.errors import MalformedResponseError, TransportError


class FakeOllama:
    reply = {"message": {"content": " Olá! "}}
    error = None

    def __init__(self, host=None, timeout=None):
        self.host = host
        self.timeout = timeout
        self.requests = []

    def chat(self, model, messages):
        self.requests.append((model, messages))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(autouse=True)
def fake_ollama(monkeypatch):
    monkeypatch.setattr(ollama_client.ollama, "Client", FakeOllama)
    monkeypatch.delenv("LLM_PROVIDER", raising=False)


def test_ollama_sends_system_and_user_messages():
    client = OllamaClient(model="llama3", timeout=5)
    assert client.generate("Oi", system_prompt="Seja breve") == "Olá!"
    model, messages = client.client.requests[0]
    assert model == "llama3"
    assert [m["role"] for m in messages] == ["system", "user"]


def test_ollama_failure_is_transport_error():
    client = OllamaClient()
    client.client.error = ConnectionError("ollama is not running")
    with pytest.raises(TransportError):
        client.generate("Oi")


def test_ollama_empty_reply_is_malformed():
    client = OllamaClient()
    client.client.reply = {"message": {"content": "  "}}
    with pytest.raises(MalformedResponseError):
        client.generate("Oi")


@pytest.mark.parametrize(
    "provider, kind",
    [(None, GeminiClient), ("gemini", GeminiClient), ("OLLAMA", OllamaClient), ("gpt", GeminiClient)],
)
def test_build_collaborator(provider, kind):
    assert isinstance(llm.build_collaborator(provider), kind)


def test_provider_from_environment(monkeypatch):
    monkeypatch.setenv("LLM_PROVIDER", "ollama")
    assert isinstance(llm.build_collaborator(), OllamaClient)
