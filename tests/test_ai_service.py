import asyncio

import pytest

from lingosnap.errors import ProviderError
from lingosnap.services import AIConfig, AIProvider, AIService, create_ai_service
from lingosnap.services.ai_service import parse_provider


class FakeProvider:
    name = 'gemini'

    def __init__(self, reply):
        self.reply = reply
        self.prompts = []

    async def complete(self, prompt, system_prompt=None, json_mode=False):
        self.prompts.append((prompt, system_prompt, json_mode))
        return self.reply

    async def close(self):
        pass


def _service(reply):
    service = AIService(AIConfig(provider=AIProvider.GEMINI, api_key='test'), target_language='Persian')
    service._provider = FakeProvider(reply)
    return service


def test_fetch_word_info_parses_fenced_json():
    reply = '''```json
{"meaning": "سیب", "phonetic": "اَپِل", "illustrationPrompt": "a red apple",
 "exampleSentence": "I like apples.", "exampleTranslation": "من سیب دوست دارم."}
```'''
    service = _service(reply)

    info = asyncio.run(service.fetch_word_info('apple'))

    assert info.meaning == 'سیب'
    assert info.illustration_prompt == 'a red apple'
    prompt, system_prompt, json_mode = service._provider.prompts[0]
    assert '"apple"' in prompt and 'Persian' in prompt
    assert system_prompt == AIService.SYSTEM_PROMPTS['word_info']
    assert json_mode is True


def test_missing_field_is_provider_error():
    service = _service('{"meaning": "سیب", "phonetic": "اَپِل"}')

    with pytest.raises(ProviderError) as exc:
        asyncio.run(service.fetch_word_info('apple'))

    assert 'illustrationPrompt' in str(exc.value)
    assert exc.value.provider == 'gemini'


def test_non_json_reply_is_provider_error():
    service = _service('Sorry, I cannot help with that.')

    with pytest.raises(ProviderError):
        asyncio.run(service.fetch_word_info('apple'))


def test_parse_provider_defaults_to_gemini():
    assert parse_provider('OpenAI') is AIProvider.OPENAI
    assert parse_provider('unknown') is AIProvider.GEMINI
    assert parse_provider(None) is AIProvider.GEMINI


def test_create_ai_service_uses_model_defaults(monkeypatch):
    monkeypatch.setenv('GROQ_API_KEY', 'gsk-test')

    service = create_ai_service('groq', target_language='German')

    assert service.config.provider is AIProvider.GROQ
    assert service.config.model == 'llama-3.1-8b-instant'
    assert service.config.api_key == 'gsk-test'
    assert service.is_configured


def test_ollama_needs_no_key():
    service = AIService(AIConfig(provider=AIProvider.OLLAMA, api_key=None))
    assert service.is_configured
