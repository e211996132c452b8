"""
AI Service - LLM integration for word lookups.

Provides abstraction over multiple LLM providers (Gemini, OpenAI, Anthropic,
local models) for the Word Info step of a search: translation, phonetic
transcription, an example sentence with translation and a short
illustration prompt.
"""

import asyncio
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

import aiohttp

from ..config import Config
from ..errors import ProviderError
from ..models import WordInfo
from ..utils import setup_logger
from ..utils.parsing import TextParser

logger = setup_logger(__name__)


class AIProvider(Enum):
    """Supported AI providers."""
    GEMINI = "gemini"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    OLLAMA = "ollama"  # Local models
    GROQ = "groq"  # Fast inference


MODEL_DEFAULTS = {
    AIProvider.GEMINI: "gemini-2.5-flash",
    AIProvider.OPENAI: "gpt-4o-mini",
    AIProvider.ANTHROPIC: "claude-3-haiku-20240307",
    AIProvider.OLLAMA: "llama3.2",
    AIProvider.GROQ: "llama-3.1-8b-instant",
}

API_KEY_ENV = {
    AIProvider.GEMINI: "GEMINI_API_KEY",
    AIProvider.OPENAI: "OPENAI_API_KEY",
    AIProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    AIProvider.GROQ: "GROQ_API_KEY",
}


def parse_provider(name: Optional[str]) -> AIProvider:
    """Map a provider name to AIProvider, defaulting to Gemini."""
    try:
        return AIProvider((name or "").lower())
    except ValueError:
        return AIProvider.GEMINI


@dataclass
class AIConfig:
    """Configuration for AI service."""
    provider: AIProvider = AIProvider.GEMINI
    model: str = "gemini-2.5-flash"
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    temperature: float = 0.7
    max_tokens: int = 1000
    timeout: int = 30

    @classmethod
    def from_env(cls) -> "AIConfig":
        """Create config from environment variables (via Config)."""
        provider = parse_provider(Config.AI_PROVIDER)
        key_env = API_KEY_ENV.get(provider)
        return cls(
            provider=provider,
            model=Config.AI_MODEL or MODEL_DEFAULTS[provider],
            api_key=os.environ.get(key_env) if key_env else None,
            base_url=Config.AI_BASE_URL or None,
            temperature=Config.AI_TEMPERATURE,
            timeout=Config.TIMEOUT,
        )


class BaseAIProvider(ABC):
    """Abstract base class for AI providers."""

    def __init__(self, config: AIConfig):
        self.config = config
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def name(self) -> str:
        return self.config.provider.value

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        """Close the session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def _post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """POST a JSON payload and return the decoded JSON reply."""
        session = await self._get_session()
        try:
            async with session.post(url, headers=headers, json=payload) as response:
                if response.status != 200:
                    error = await response.text()
                    raise ProviderError(
                        f"{self.name} API error {response.status}: {error[:200]}",
                        provider=self.name,
                    )
                return await response.json()
        except asyncio.TimeoutError as e:
            raise ProviderError(f"{self.name} API timeout", provider=self.name) from e
        except aiohttp.ClientConnectorError as e:
            raise ProviderError(f"Cannot connect to {self.name}: {e}", provider=self.name) from e
        except aiohttp.ClientError as e:
            raise ProviderError(f"{self.name} request failed: {e}", provider=self.name) from e

    def _extract(self, data: Dict[str, Any], path: tuple) -> str:
        """Walk a nested reply and return the text at path."""
        node: Any = data
        try:
            for key in path:
                node = node[key]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(f"Unexpected {self.name} reply shape", provider=self.name) from e
        if not isinstance(node, str):
            raise ProviderError(f"Unexpected {self.name} reply shape", provider=self.name)
        return node

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        json_mode: bool = False,
    ) -> str:
        """Generate completion for the given prompt."""
        pass


class GeminiProvider(BaseAIProvider):
    """Google Gemini API provider."""

    DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

    async def complete(self, prompt: str, system_prompt: Optional[str] = None, json_mode: bool = False) -> str:
        """Generate completion using the Gemini generateContent endpoint."""
        base_url = self.config.base_url or self.DEFAULT_BASE_URL
        url = f"{base_url}/models/{self.config.model}:generateContent"

        headers = {
            "x-goog-api-key": self.config.api_key or "",
            "Content-Type": "application/json",
        }

        generation_config: Dict[str, Any] = {
            "temperature": self.config.temperature,
            "maxOutputTokens": self.config.max_tokens,
        }
        if json_mode:
            generation_config["responseMimeType"] = "application/json"

        payload: Dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": generation_config,
        }
        if system_prompt:
            payload["systemInstruction"] = {"parts": [{"text": system_prompt}]}

        data = await self._post_json(url, payload, headers)
        return self._extract(data, ("candidates", 0, "content", "parts", 0, "text"))


class OpenAIProvider(BaseAIProvider):
    """OpenAI API provider (also works with compatible APIs)."""

    DEFAULT_BASE_URL = "https://api.openai.com/v1"

    def _base_url(self) -> str:
        return self.config.base_url or self.DEFAULT_BASE_URL

    async def complete(self, prompt: str, system_prompt: Optional[str] = None, json_mode: bool = False) -> str:
        """Generate completion using OpenAI API."""
        url = f"{self._base_url()}/chat/completions"

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

        payload: Dict[str, Any] = {
            "model": self.config.model,
            "messages": messages,
            "temperature": self.config.temperature,
            "max_tokens": self.config.max_tokens,
        }
        if json_mode:
            payload["response_format"] = {"type": "json_object"}

        data = await self._post_json(url, payload, headers)
        return self._extract(data, ("choices", 0, "message", "content"))


class GroqProvider(OpenAIProvider):
    """Groq fast inference provider (OpenAI-compatible)."""

    DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"


class AnthropicProvider(BaseAIProvider):
    """Anthropic Claude API provider."""

    BASE_URL = "https://api.anthropic.com/v1"

    async def complete(self, prompt: str, system_prompt: Optional[str] = None, json_mode: bool = False) -> str:
        """Generate completion using Anthropic API."""
        url = f"{self.config.base_url or self.BASE_URL}/messages"

        headers = {
            "x-api-key": self.config.api_key or "",
            "anthropic-version": "2023-06-01",
            "Content-Type": "application/json",
        }

        payload: Dict[str, Any] = {
            "model": self.config.model,
            "max_tokens": self.config.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system_prompt:
            payload["system"] = system_prompt

        data = await self._post_json(url, payload, headers)
        return self._extract(data, ("content", 0, "text"))


class OllamaProvider(BaseAIProvider):
    """Ollama local model provider."""

    DEFAULT_BASE_URL = "http://localhost:11434"

    async def complete(self, prompt: str, system_prompt: Optional[str] = None, json_mode: bool = False) -> str:
        """Generate completion using local Ollama."""
        url = f"{self.config.base_url or self.DEFAULT_BASE_URL}/api/generate"

        full_prompt = f"{system_prompt}\n\n{prompt}" if system_prompt else prompt

        payload: Dict[str, Any] = {
            "model": self.config.model,
            "prompt": full_prompt,
            "stream": False,
            "options": {
                "temperature": self.config.temperature,
            },
        }
        if json_mode:
            payload["format"] = "json"

        data = await self._post_json(url, payload)
        return self._extract(data, ("response",))


PROVIDER_CLASSES = {
    AIProvider.GEMINI: GeminiProvider,
    AIProvider.OPENAI: OpenAIProvider,
    AIProvider.ANTHROPIC: AnthropicProvider,
    AIProvider.OLLAMA: OllamaProvider,
    AIProvider.GROQ: GroqProvider,
}


class AIService:
    """
    High-level AI service acting as the Word Info provider.

    Asks the configured LLM for a JSON record describing an English word in
    the target language and validates it into a WordInfo.
    """

    SYSTEM_PROMPTS = {
        "word_info": """You are a bilingual dictionary assistant for English learners.
Rules:
- Answer with a single JSON object and nothing else
- Use exactly the keys requested
- Keep the example sentence short, common and natural
- The illustration prompt describes a simple visual, no text in the image""",
    }

    WORD_INFO_PROMPT = """Translate the English word "{word}" to {language}.
Provide:
1. The {language} meaning.
2. The {language} phonetic pronunciation, written in {language} script (e.g. apple -> اَپِل for Persian).
3. A short 5-word prompt for a simple, clean clipart illustration of this word.
4. A short, common English example sentence using the word.
5. The {language} translation of that example sentence.

Return JSON with the keys "meaning", "phonetic", "illustrationPrompt", "exampleSentence", "exampleTranslation"."""

    def __init__(self, config: Optional[AIConfig] = None, target_language: Optional[str] = None):
        """
        Initialize AI service.

        Args:
            config: AI configuration. If None, uses environment variables.
            target_language: Language to translate into (defaults to Config.TARGET_LANGUAGE)
        """
        self.config = config or AIConfig.from_env()
        self.target_language = target_language or Config.TARGET_LANGUAGE
        self._provider: Optional[BaseAIProvider] = None

    def _get_provider(self) -> BaseAIProvider:
        """Get or create the appropriate provider."""
        if self._provider is None:
            provider_class = PROVIDER_CLASSES.get(self.config.provider, GeminiProvider)
            self._provider = provider_class(self.config)
        return self._provider

    async def close(self) -> None:
        """Close the AI service and release resources."""
        if self._provider:
            await self._provider.close()
            self._provider = None

    def build_word_info_prompt(self, word: str) -> str:
        return self.WORD_INFO_PROMPT.format(word=word, language=self.target_language)

    async def fetch_word_info(self, word: str) -> WordInfo:
        """
        Look up translation, phonetic, example and illustration prompt for a word.

        Args:
            word: Normalized English word

        Returns:
            Validated WordInfo

        Raises:
            ProviderError: If the call fails or the reply is not a complete record
        """
        provider = self._get_provider()

        response = await provider.complete(
            self.build_word_info_prompt(word),
            self.SYSTEM_PROMPTS["word_info"],
            json_mode=True,
        )

        try:
            payload = TextParser.extract_json(response)
        except ValueError as e:
            raise ProviderError(f"No response from AI: {e}", provider=provider.name) from e

        info = WordInfo.from_payload(payload, provider=provider.name)
        logger.debug("Word info for %r: %s", word, info)
        return info

    @property
    def is_configured(self) -> bool:
        """Check if AI service is properly configured."""
        if self.config.provider == AIProvider.OLLAMA:
            return True  # Ollama doesn't need API key
        return bool(self.config.api_key)


def create_ai_service(
    provider: str = "gemini",
    model: Optional[str] = None,
    api_key: Optional[str] = None,
    target_language: Optional[str] = None,
) -> AIService:
    """
    Create an AI service with specified configuration.

    Args:
        provider: Provider name (gemini, openai, anthropic, ollama, groq)
        model: Model name (uses default if None)
        api_key: API key (uses environment if None)
        target_language: Language to translate into

    Returns:
        Configured AIService instance
    """
    provider_enum = parse_provider(provider)
    key_env = API_KEY_ENV.get(provider_enum)

    config = AIConfig(
        provider=provider_enum,
        model=model or MODEL_DEFAULTS[provider_enum],
        api_key=api_key or (os.environ.get(key_env) if key_env else None),
        timeout=Config.TIMEOUT,
    )

    return AIService(config, target_language=target_language)
