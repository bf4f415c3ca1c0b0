"""Chat completions routed through QStash."""

from ..models.llm import ChatCompletion, ChatCompletionRequest
from .base import Resource


class Llm(Resource):
    async def create_chat_completion(self, request: ChatCompletionRequest) -> ChatCompletion:
        """Run a non-streaming chat completion."""
        if request.stream:
            raise ValueError("Streaming chat completions are not supported")

        return await self._http.request_model(
            "POST",
            "/llm/v1/chat/completions",
            ChatCompletion,
            json=request.to_wire(),
        )
