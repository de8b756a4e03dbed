from datetime import timedelta

import pytest
from fastapi import APIRouter, Response
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.security import create_access_token
from app.main import create_app

TEST_SECRET = "test-secret-do-not-use"

pages = APIRouter()


@pages.get("/")
def home():
    return {"page": "home"}


@pages.get("/auth/login")
def login_page():
    return {"page": "login"}


@pages.get("/startups/{rest:path}")
def startup_page(rest: str):
    return {"page": "startups", "path": rest}


@pages.get("/investor/{rest:path}")
def investor_page(rest: str):
    return {"page": "investor", "path": rest}


@pages.get("/authors")
def authors_page():
    return {"page": "authors"}


@pages.get("/investors")
def investors_page():
    return {"page": "investors"}


@pages.get("/startup/{startup_id}/offer")
def offer_page(startup_id: str):
    return {"page": "offer", "startup_id": startup_id}


@pages.get("/api/startups")
def list_startups():
    return []


@pages.get("/favicon.ico")
def favicon():
    return Response(content=b"", media_type="image/x-icon")


@pages.post("/api/auth/test-login")
def test_login(response: Response, user_id: str, user_type: str):
    token = create_access_token({"id": user_id, "userType": user_type}, TEST_SECRET)
    response.set_cookie(key="token", value=token, httponly=True, samesite="lax")
    return {"ok": True}


@pytest.fixture
def settings():
    return Settings(JWT_SECRET=TEST_SECRET, _env_file=None)


@pytest.fixture
def app(settings):
    application = create_app(settings)
    application.include_router(pages)
    return application


@pytest.fixture
def client(app):
    with TestClient(app, follow_redirects=False) as c:
        yield c


@pytest.fixture
def make_token():
    def _make(claims, secret=TEST_SECRET, expires_delta=None, algorithm="HS256"):
        return create_access_token(
            claims, secret, expires_delta=expires_delta, algorithm=algorithm
        )
    return _make


@pytest.fixture
def startup_token(make_token):
    return make_token({"id": "s-1", "userType": "startup"})


@pytest.fixture
def investor_token(make_token):
    return make_token({"id": "inv-1", "userType": "investor"})


@pytest.fixture
def expired_token(make_token):
    return make_token(
        {"id": "inv-1", "userType": "investor"},
        expires_delta=timedelta(minutes=-5)
    )
