"""Shared fixtures: fake PAGASA pubfiles server"""

import sys
from pathlib import Path

import pytest
import requests

# Add project root to path for imports
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root))

INDEX_URL = "https://pubfiles.example.org/pagasaweb/files/cad/"

INDEX_HTML = """
<html><body>
<h1>Index of /pagasaweb/files/cad/</h1>
<a href="/pagasaweb/">Home</a>
<pre><a href="../">../</a>
<a href="CLIMATOLOGICAL%20NORMALS%20(1991-2020)/">CLIMATOLOGICAL NORMALS (1991-2020)/</a>  01-Feb-2023 10:12  -
<a href="Climate%20Bulletin/">Climate Bulletin/</a>  01-Feb-2023 10:12  -
<a href="CLIMATOLOGICAL%20EXTREMES/">CLIMATOLOGICAL EXTREMES/</a>  01-Feb-2023 10:12  -
<a href="bulletin/">bulletin/</a>  01-Feb-2023 10:12  -
</pre>
</body></html>
"""

DIRECTORY_URL = INDEX_URL + "CLIMATOLOGICAL%20NORMALS%20(1991-2020)/"

DIRECTORY_HTML = """
<html><body>
<a href="elsewhere.pdf">not in listing</a>
<pre><a href="../">../</a>
<a href="Aparri%20%281991-2020%29.pdf">Aparri (1991-2020).pdf</a>  01-Feb-2023 10:12  120K
<a href="README.txt">README.txt</a>  01-Feb-2023 10:12  1K
<a href="Baguio%20%281991-2020%29.pdf">Baguio (1991-2020).pdf</a>  01-Feb-2023 10:12  118K
<a>no href</a>
<a href="abcpdfxyz">abcpdfxyz</a>  01-Feb-2023 10:12  1K
<a href="Legacy.PDF">Legacy.PDF</a>  01-Feb-2023 10:12  1K
</pre>
</body></html>
"""


class FakeResponse:
    """Minimal stand-in for requests.Response"""

    def __init__(self, url, status_code=200, text="", content=b""):
        self.url = url
        self.status_code = status_code
        self.text = text
        self.content = content

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}")

    def iter_content(self, chunk_size=1):
        for start in range(0, len(self.content), chunk_size):
            yield self.content[start : start + chunk_size]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeServer:
    """Serves canned pages and records every requested URL"""

    def __init__(self):
        self.pages = {}
        self.requests = []

    def add_page(self, url, text="", content=b"", status_code=200):
        self.pages[url] = FakeResponse(url, status_code, text, content)

    def get(self, url, **kwargs):
        self.requests.append(url)
        if url not in self.pages:
            raise requests.ConnectionError(f"Connection refused: {url}")
        return self.pages[url]

    def count(self, url):
        return self.requests.count(url)


@pytest.fixture
def server(monkeypatch):
    """Route requests.get and requests.Session.get to a FakeServer"""
    fake = FakeServer()
    fake.add_page(INDEX_URL, text=INDEX_HTML)
    fake.add_page(DIRECTORY_URL, text=DIRECTORY_HTML)

    monkeypatch.setattr(requests, "get", fake.get)
    monkeypatch.setattr(
        requests.Session, "get", lambda self, url, **kwargs: fake.get(url, **kwargs)
    )
    return fake
