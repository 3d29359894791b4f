"""AI 음성 프록시 테스트 (외부 API는 모킹)"""

import base64
import json
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from langchain_core.messages import AIMessage

from cooking_assistant.core.config import Settings
from cooking_assistant.main import app
from cooking_assistant.services import voice_service
from cooking_assistant.services.voice_service import VoiceService, get_voice_service


def _settings(**overrides) -> Settings:
    values = {"google_cloud_api_key": "google-key", "openai_api_key": "openai-key"}
    values.update(overrides)
    return Settings(**values)


def _service(handler, **overrides) -> VoiceService:
    """외부 HTTP 호출을 handler로 대신 처리하는 서비스"""
    service = VoiceService(_settings(**overrides))
    service._client = lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return service


def _google_handler(requests, transcript="불 세기는 어떻게 해요?", tts_status=200):
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.host.startswith("speech."):
            return httpx.Response(200, json={"results": [{"alternatives": [{"transcript": transcript}]}]})
        if tts_status != 200:
            return httpx.Response(tts_status, text="quota exceeded")
        return httpx.Response(200, json={"audioContent": "QVVESU8="})

    return handler


def _mock_llm(content="중불로 볶아주세요."):
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=AIMessage(content=content))
    return llm


class TestVoiceService:
    def test_system_prompt_defaults(self):
        prompt = voice_service.build_system_prompt(None, None)

        assert "사용자가 요리를 만들고 있으며, 현재 조리 중입니다." in prompt
        assert "2-3문장" in prompt

    @pytest.mark.asyncio
    async def test_transcribe_request_format(self):
        requests = []
        service = _service(_google_handler(requests))

        transcript = await service.transcribe(b"audio-bytes")

        assert transcript == "불 세기는 어떻게 해요?"
        body = json.loads(requests[0].content)
        assert body["config"] == {
            "encoding": "WEBM_OPUS",
            "sampleRateHertz": 48000,
            "languageCode": "ko-KR",
            "enableAutomaticPunctuation": True,
        }
        assert body["audio"]["content"] == base64.b64encode(b"audio-bytes").decode()
        assert requests[0].url.params["key"] == "google-key"

    @pytest.mark.asyncio
    async def test_transcribe_without_results(self):
        service = _service(lambda request: httpx.Response(200, json={}))

        assert await service.transcribe(b"x") == voice_service.UNRECOGNIZED_TRANSCRIPT

    @pytest.mark.asyncio
    async def test_transcribe_upstream_error(self):
        service = _service(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(voice_service.VoiceProcessingError):
            await service.transcribe(b"x")

    @pytest.mark.asyncio
    async def test_process_voice_non_json_transcript(self):
        service = _service(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(voice_service.VoiceProcessingError):
            await service.process_voice(b"x")

    @pytest.mark.asyncio
    async def test_transcribe_json_list_is_unrecognized(self):
        service = _service(lambda request: httpx.Response(200, json=["unexpected"]))

        assert await service.transcribe(b"x") == voice_service.UNRECOGNIZED_TRANSCRIPT

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="<html>oops</html>"),
            httpx.Response(200, json=["unexpected"]),
        ],
    )
    async def test_synthesize_malformed_body_returns_none(self, response):
        service = _service(lambda request: response)

        assert await service.synthesize("안녕하세요") is None

    @pytest.mark.asyncio
    async def test_synthesize_returns_data_url(self):
        requests = []
        service = _service(_google_handler(requests))

        audio_url = await service.synthesize("안녕하세요")

        assert audio_url == "data:audio/mp3;base64,QVVESU8="
        body = json.loads(requests[0].content)
        assert body["voice"] == {"languageCode": "ko-KR", "name": "ko-KR-Standard-A", "ssmlGender": "FEMALE"}
        assert body["audioConfig"]["audioEncoding"] == "MP3"

    @pytest.mark.asyncio
    async def test_synthesize_failure_returns_none(self):
        service = _service(_google_handler([], tts_status=403))

        assert await service.synthesize("안녕하세요") is None

    @pytest.mark.asyncio
    async def test_synthesize_without_key(self):
        service = _service(_google_handler([]), google_cloud_api_key=None)

        assert await service.synthesize("안녕하세요") is None

    @pytest.mark.asyncio
    async def test_process_voice_demo_mode(self):
        requests = []
        service = _service(_google_handler(requests), google_cloud_api_key=None)

        result = await service.process_voice(b"x")

        assert result == {
            "text": voice_service.DEMO_TRANSCRIPT,
            "response": voice_service.DEMO_RESPONSE,
            "audioUrl": None,
        }
        assert requests == []

    @pytest.mark.asyncio
    async def test_process_voice_without_openai_key(self):
        service = _service(_google_handler([]), openai_api_key=None)

        result = await service.process_voice(b"x")

        assert result["text"] == "불 세기는 어떻게 해요?"
        assert result["response"] == voice_service.MISSING_LLM_RESPONSE
        assert result["audioUrl"] is None

    @pytest.mark.asyncio
    async def test_process_voice_full_pipeline(self):
        llm = _mock_llm()
        service = _service(_google_handler([]))

        with patch.object(voice_service, "ChatOpenAI", return_value=llm) as chat_cls:
            result = await service.process_voice(b"x", recipe_name="김치볶음밥", current_step="2단계")

        assert result == {
            "text": "불 세기는 어떻게 해요?",
            "response": "중불로 볶아주세요.",
            "audioUrl": "data:audio/mp3;base64,QVVESU8=",
        }
        kwargs = chat_cls.call_args.kwargs
        assert kwargs["temperature"] == 0.7
        assert kwargs["max_tokens"] == 150
        messages = llm.ainvoke.call_args.args[0]
        assert "김치볶음밥" in messages[0].content
        assert "2단계" in messages[0].content
        assert messages[1].content == "불 세기는 어떻게 해요?"

    @pytest.mark.asyncio
    async def test_empty_llm_reply(self):
        service = _service(_google_handler([]))

        with patch.object(voice_service, "ChatOpenAI", return_value=_mock_llm("  ")):
            reply = await service.generate_reply("질문")

        assert reply == voice_service.EMPTY_LLM_RESPONSE


@pytest.fixture
def voice_client(client):
    service = MagicMock()
    service.process_voice = AsyncMock(
        return_value={"text": "다음 단계", "response": "다음 단계로 넘어갈게요.", "audioUrl": None}
    )
    service.synthesize = AsyncMock(return_value="data:audio/mp3;base64,QQ==")
    app.dependency_overrides[get_voice_service] = lambda: service
    return client, service


def test_stt_route(voice_client, auth_headers):
    client, service = voice_client

    response = client.post(
        "/api/ai/voice/stt",
        headers=auth_headers,
        files={"audio": ("voice.webm", b"webm-bytes", "audio/webm")},
        data={"currentStep": "1단계", "recipeName": "김치볶음밥"},
    )

    assert response.status_code == 200
    assert response.json() == {"text": "다음 단계", "response": "다음 단계로 넘어갈게요.", "audioUrl": None}
    service.process_voice.assert_awaited_once_with(b"webm-bytes", "김치볶음밥", "1단계")


def test_stt_route_without_audio(voice_client, auth_headers):
    client, _ = voice_client

    response = client.post("/api/ai/voice/stt", headers=auth_headers, data={"recipeName": "김치볶음밥"})

    assert response.status_code == 400
    assert response.json() == {"error": "No audio file provided"}


def test_stt_route_upstream_failure(voice_client, auth_headers):
    client, service = voice_client
    service.process_voice.side_effect = voice_service.VoiceProcessingError("Failed to transcribe audio")

    response = client.post(
        "/api/ai/voice/stt",
        headers=auth_headers,
        files={"audio": ("voice.webm", b"webm-bytes", "audio/webm")},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process voice input", "details": "Failed to transcribe audio"}


def test_stt_route_non_json_upstream(client, auth_headers):
    service = _service(lambda request: httpx.Response(200, text="<html>oops</html>"))
    app.dependency_overrides[get_voice_service] = lambda: service

    response = client.post(
        "/api/ai/voice/stt",
        headers=auth_headers,
        files={"audio": ("voice.webm", b"webm-bytes", "audio/webm")},
    )

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to process voice input"
    assert "details" in response.json()


def test_stt_requires_auth(voice_client):
    client, _ = voice_client

    response = client.post("/api/ai/voice/stt", files={"audio": ("voice.webm", b"x", "audio/webm")})

    assert response.status_code == 401


def test_tts_route(voice_client, auth_headers):
    client, service = voice_client

    response = client.post("/api/ai/voice/tts", headers=auth_headers, json={"text": "안녕하세요"})

    assert response.status_code == 200
    assert response.json() == {"audioUrl": "data:audio/mp3;base64,QQ=="}
    service.synthesize.assert_awaited_once_with("안녕하세요")


def test_tts_route_empty_text(voice_client, auth_headers):
    client, _ = voice_client

    response = client.post("/api/ai/voice/tts", headers=auth_headers, json={"text": " "})

    assert response.status_code == 400
    assert response.json() == {"error": "No text provided"}
