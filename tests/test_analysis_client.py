import json
from urllib.parse import parse_qs

import httpx
import pytest

from cropcare.models import AnalysisRecord, CandidateImage
from cropcare.services.analysis_client import AnalysisClient, AnalysisSubmitError
from cropcare.services.diseases import get_random_disease

ENDPOINT = "http://backend.test/api/analysis"


def make_client(handler):
    return AnalysisClient(endpoint=ENDPOINT, transport=httpx.MockTransport(handler))


def tomato_record():
    return AnalysisRecord(crop_name="Tomato", symptoms="yellow spots", disease=get_random_disease("Tomato"))


def test_form_fields_split_treatments_by_type():
    fields = tomato_record().form_fields()
    assert fields["cropName"] == "Tomato"
    assert fields["diseaseDetected"] == "Early Blight"
    assert fields["confidence"] == "92"
    assert fields["severity"] == "Medium"
    assert fields["symptoms"] == "yellow spots"
    pesticide = json.loads(fields["pesticide"])
    assert [t["name"] for t in pesticide] == ["Chlorothalonil Fungicide"]
    assert pesticide[0]["type"] == "pesticide"
    assert json.loads(fields["organic"])[0]["name"] == "Neem Oil"


async def test_submit_posts_form_fields():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["form"] = parse_qs(request.content.decode())
        return httpx.Response(201, json={"id": "abc"})

    client = make_client(handler)
    assert await client.submit(tomato_record()) == {"id": "abc"}
    await client.close()

    assert seen["method"] == "POST"
    assert seen["url"] == ENDPOINT
    assert seen["form"]["diseaseDetected"] == ["Early Blight"]
    assert seen["form"]["cropName"] == ["Tomato"]


async def test_submit_attaches_image_as_multipart():
    seen = {}

    def handler(request):
        seen["content_type"] = request.headers["content-type"]
        seen["body"] = request.content
        return httpx.Response(200, json={})

    client = make_client(handler)
    image = CandidateImage(content=b"\x89PNG-bytes", media_type="image/png", filename="leaf.png")
    await client.submit(tomato_record(), image)

    assert seen["content_type"].startswith("multipart/form-data")
    assert b'name="image"; filename="leaf.png"' in seen["body"]
    assert b"\x89PNG-bytes" in seen["body"]
    assert b'name="diseaseDetected"' in seen["body"]


async def test_error_status_raises_with_backend_message():
    client = make_client(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(AnalysisSubmitError) as excinfo:
        await client.submit(tomato_record())
    assert excinfo.value.status == 500
    assert str(excinfo.value) == "Backend error: 500 boom"


async def test_unfollowable_redirect_is_not_a_success():
    client = make_client(lambda request: httpx.Response(304))
    with pytest.raises(AnalysisSubmitError) as excinfo:
        await client.submit(tomato_record())
    assert excinfo.value.status == 304


async def test_redirects_are_followed_before_checking_status():
    seen = []

    def handler(request):
        seen.append(request.url.path)
        if request.url.path == "/api/analysis":
            return httpx.Response(307, headers={"Location": "/api/v2/analysis"})
        return httpx.Response(200, json={"id": "moved"})

    client = make_client(handler)
    assert await client.submit(tomato_record()) == {"id": "moved"}
    assert seen == ["/api/analysis", "/api/v2/analysis"]


async def test_image_without_filename_gets_placeholder_name():
    bodies = []

    def handler(request):
        bodies.append(request.content)
        return httpx.Response(200, json={})

    client = make_client(handler)
    await client.submit(tomato_record(), CandidateImage(content=b"raw", media_type="image/jpeg"))
    assert b'name="image"; filename="upload"' in bodies[0]


async def test_disabled_client_refuses_to_submit():
    client = AnalysisClient(endpoint="")
    assert not client.enabled
    with pytest.raises(RuntimeError):
        await client.submit(tomato_record())
