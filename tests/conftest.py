# tests/conftest.py
import json
import uuid
from types import SimpleNamespace

import httpx
import pytest
from openai import OpenAI

from resumeai import create_app
from resumeai.extensions import build_clients

VALID_TOKEN = "good-token"
PRINCIPAL = "user-123"


# ---------- Supabase fake ----------
class FakeAuth:
    def __init__(self, tokens):
        self.tokens = tokens
        self.calls = []

    def get_user(self, jwt):
        self.calls.append(jwt)
        if jwt not in self.tokens:
            raise Exception("invalid JWT: token is expired")
        return SimpleNamespace(user=SimpleNamespace(id=self.tokens[jwt], email="u@example.com"))


class FakeQuery:
    def __init__(self, result=None, error=None, on_execute=None):
        self.result = result
        self.error = error
        self.on_execute = on_execute

    def execute(self):
        if self.error is not None:
            raise self.error
        if self.on_execute:
            self.on_execute()
        return SimpleNamespace(data=self.result)


class FakeTable:
    def __init__(self, store, name):
        self.store = store
        self.name = name

    def insert(self, row):
        row = dict(row)
        row.setdefault("id", str(uuid.uuid4()))
        return FakeQuery([row], on_execute=lambda: self.store.writes.append(("insert", self.name, row)))

    def upsert(self, row):
        row = dict(row)
        return FakeQuery([row], on_execute=lambda: self.store.writes.append(("upsert", self.name, row)))


class FakeSupabase:
    def __init__(self, tokens=None):
        self.auth = FakeAuth(tokens if tokens is not None else {VALID_TOKEN: PRINCIPAL})
        self.rpc_calls = []
        self.rpc_error = None
        self.writes = []

    def rpc(self, fn, params):
        self.rpc_calls.append((fn, params))
        return FakeQuery([], error=self.rpc_error)

    def table(self, name):
        return FakeTable(self, name)


# ---------- OpenAI fake (real SDK, mocked transport) ----------
class FakeCompletionAPI:
    """httpx transport handler standing in for /v1/chat/completions."""

    def __init__(self):
        self.requests = []
        self.status = 200
        self.payload = chat_completion("[]", 0)
        self.exc = None

    def reply(self, content, total_tokens=0):
        self.status, self.payload = 200, chat_completion(content, total_tokens)

    def fail(self, status, payload):
        self.status, self.payload = status, payload

    def __call__(self, request):
        self.requests.append(json.loads(request.content))
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status, json=self.payload)


def chat_completion(content, total_tokens=0, with_usage=True):
    body = {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
        ],
    }
    if with_usage:
        body["usage"] = {"prompt_tokens": 0, "completion_tokens": total_tokens, "total_tokens": total_tokens}
    return body


@pytest.fixture
def supabase():
    return FakeSupabase()


@pytest.fixture
def completion_api():
    return FakeCompletionAPI()


@pytest.fixture
def openai_client(completion_api):
    http_client = httpx.Client(transport=httpx.MockTransport(completion_api))
    client = OpenAI(
        api_key="test-key",
        base_url="https://openai.test/v1",
        max_retries=0,
        http_client=http_client,
    )
    yield client
    http_client.close()


@pytest.fixture
def clients(supabase, openai_client):
    return build_clients(supabase, openai_client)


@pytest.fixture
def app(supabase, openai_client):
    return create_app("test", supabase=supabase, openai_client=openai_client)


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


def make_event(method="POST", body=None, token=VALID_TOKEN, headers=None):
    hdrs = dict(headers or {})
    if token is not None:
        hdrs["authorization"] = f"Bearer {token}"
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)
    return {"httpMethod": method, "headers": hdrs, "body": body}


def body_of(result):
    return json.loads(result["body"])
