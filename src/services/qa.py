"""Grounded question answering over the current document's full text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from contract_qa.telemetry import traceable_if_enabled
from core.config import Settings, get_settings

if TYPE_CHECKING:
    from langchain_core.messages import BaseMessage

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful assistant that analyzes contracts and legal documents. "
    "You have access to the ENTIRE document content provided below. When answering "
    "questions, search through and analyze ALL parts of the document to provide "
    "accurate and comprehensive answers. Cite specific sections, clauses, or page "
    "references when relevant."
)

USER_PROMPT_TEMPLATE = (
    "Here is the complete document content:\n\n{context}\n\n---\n\n"
    "Based on the ENTIRE document above, please answer this question: {question}"
)


class QuestionAnsweringError(RuntimeError):
    """Raised when no usable answer can be produced."""


class ChatModelLike(Protocol):
    def invoke(self, input: object) -> Any: ...


@dataclass(frozen=True)
class QAConfig:
    model: str
    model_provider: str | None = None
    temperature: float | None = 0.3
    max_tokens: int | None = 1500
    timeout: float | None = None
    max_retries: int | None = 2
    azure_endpoint: str | None = None
    azure_deployment: str | None = None
    api_version: str | None = None
    api_key: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "QAConfig":
        settings = settings or get_settings()
        key = settings.azure_openai_key
        return cls(
            model=settings.qa_model,
            model_provider=settings.qa_model_provider,
            temperature=settings.qa_temperature,
            max_tokens=settings.qa_max_tokens,
            timeout=settings.qa_timeout,
            max_retries=settings.qa_max_retries,
            azure_endpoint=settings.azure_openai_endpoint,
            azure_deployment=settings.azure_openai_deployment,
            api_version=settings.azure_openai_api_version,
            api_key=key.get_secret_value() if key is not None else None,
        )


@traceable_if_enabled(name="answer_question")
def answer_question(
    question: str,
    context: str,
    *,
    llm: ChatModelLike | None = None,
    config: QAConfig | None = None,
) -> str:
    """Answer ``question`` using ``context`` as the only grounding text."""
    question = question.strip() if isinstance(question, str) else ""
    if not question:
        raise ValueError("question must be a non-empty string")
    if not context:
        raise QuestionAnsweringError("document context is empty")

    model = llm if llm is not None else _init_chat_model(config or QAConfig.from_settings())
    logger.info("Processing question with document context length: %d", len(context))

    response = model.invoke(build_messages(question, context))
    answer = _response_text(response).strip()
    if not answer:
        raise QuestionAnsweringError("language model returned an empty answer")
    return answer


def build_messages(question: str, context: str) -> "list[BaseMessage]":
    from langchain_core.messages import HumanMessage, SystemMessage

    return [
        SystemMessage(content=SYSTEM_PROMPT),
        HumanMessage(content=USER_PROMPT_TEMPLATE.format(context=context, question=question)),
    ]


def _init_chat_model(config: QAConfig) -> ChatModelLike:
    from langchain.chat_models import init_chat_model

    kwargs: dict[str, Any] = {}
    if config.model_provider:
        kwargs["model_provider"] = config.model_provider
    if config.temperature is not None:
        kwargs["temperature"] = config.temperature
    if config.timeout is not None:
        kwargs["timeout"] = config.timeout
    if config.max_tokens is not None:
        kwargs["max_tokens"] = config.max_tokens
    if config.max_retries is not None:
        kwargs["max_retries"] = config.max_retries

    if config.model_provider == "azure_openai":
        if not config.azure_endpoint or not config.api_key:
            raise QuestionAnsweringError(
                "AZURE_OPENAI_ENDPOINT and AZURE_OPENAI_KEY must be set."
            )
        kwargs["azure_endpoint"] = config.azure_endpoint
        kwargs["api_key"] = config.api_key
        kwargs["azure_deployment"] = config.azure_deployment or config.model
        if config.api_version:
            kwargs["api_version"] = config.api_version

    return init_chat_model(config.model, **kwargs)


def _response_text(response: object) -> str:
    content = getattr(response, "content", response)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        # content blocks
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and isinstance(block.get("text"), str):
                parts.append(block["text"])
        return "".join(parts)
    return "" if content is None else str(content)


__all__ = [
    "QAConfig",
    "QuestionAnsweringError",
    "SYSTEM_PROMPT",
    "USER_PROMPT_TEMPLATE",
    "answer_question",
    "build_messages",
]
