"""Tests for talentdesk.server.sender response emission rules."""

import pytest

from talentdesk.http.response import Response
from talentdesk.server.sender import send_response


async def _emit(response: Response, *, head: bool = False) -> list[dict]:
    messages: list[dict] = []

    async def send(message: dict) -> None:
        messages.append(message)

    await send_response(response, send, head=head)
    return messages


class TestSendResponse:
    async def test_start_then_body(self) -> None:
        messages = await _emit(Response("<p>hi</p>").with_header("Cache-Control", "no-cache"))

        assert messages[0]["type"] == "http.response.start"
        assert messages[0]["status"] == 200
        headers = dict(messages[0]["headers"])
        assert headers[b"content-type"] == b"text/html; charset=utf-8"
        assert headers[b"cache-control"] == b"no-cache"
        assert headers[b"content-length"] == b"9"

        assert messages[1] == {"type": "http.response.body", "body": b"<p>hi</p>"}

    async def test_content_length_counts_bytes(self) -> None:
        messages = await _emit(Response("héllo"))
        assert dict(messages[0]["headers"])[b"content-length"] == b"6"

    async def test_head_keeps_length_drops_body(self) -> None:
        messages = await _emit(Response("x" * 40), head=True)

        assert dict(messages[0]["headers"])[b"content-length"] == b"40"
        assert messages[1]["body"] == b""

    @pytest.mark.parametrize("status", [204, 304])
    async def test_no_body_statuses(self, status: int) -> None:
        messages = await _emit(Response("unexpected-body").with_status(status))

        assert dict(messages[0]["headers"])[b"content-length"] == b"0"
        assert messages[1]["body"] == b""
