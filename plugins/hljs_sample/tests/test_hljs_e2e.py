# plugins/hljs_sample/tests/test_hljs_e2e.py
import pytest
from httpx import AsyncClient

from plugins.core_hljs.constants import HLJS_VERSION

V = f"?v={HLJS_VERSION}"


@pytest.mark.e2e
@pytest.mark.asyncio
class TestSamplePage:
    """The sample page served by the fully assembled application."""

    async def test_page_loads_rust_with_sunburst(self, client: AsyncClient):
        response = await client.get("/")
        assert response.status_code == 200, response.text
        html = response.text

        assert response.headers["content-type"].startswith("text/html")
        assert "<title>HighlightJS sample</title>" in html
        assert '<pre><code class="language-rust">// This is the main function.' in html
        assert "println!(&#34;Hello World!&#34;);" in html

        assert f'<script src="/hljs/js/core.min.js{V}"></script>' in html
        assert f'<script src="/hljs/js/lang/rust.min.js{V}"></script>' in html
        assert f'<link rel="stylesheet" href="/hljs/css/sunburst.min.css{V}">' in html
        assert "tabReplace: '    '," in html
        assert "hljs.highlightAll();" in html

    async def test_assets_are_in_head_in_order(self, client: AsyncClient):
        html = (await client.get("/")).text
        head = html[:html.index("</head>")]

        assert head.index("sunburst.min.css") < head.index("core.min.js")
        assert head.index("core.min.js") < head.index("rust.min.js")
        assert head.index("rust.min.js") < head.index("hljs.configure(")

    async def test_static_files_are_mounted(self, client: AsyncClient):
        response = await client.get("/hljs/README.md")
        assert response.status_code == 200

    async def test_each_request_starts_with_fresh_preferences(self, client: AsyncClient):
        first = (await client.get("/")).text
        second = (await client.get("/")).text

        assert first.count("rust.min.js") == 1
        assert first == second


@pytest.mark.e2e
@pytest.mark.asyncio
@pytest.mark.parametrize("app_settings", [{"hljs": {"library": "common", "tabsize": 2}}])
async def test_common_library_from_settings(client: AsyncClient):
    html = (await client.get("/")).text

    assert f'<script src="/hljs/js/highlight.min.js{V}"></script>' in html
    assert "core.min.js" not in html
    assert "lang/rust.min.js" not in html
    assert "tabReplace: '  '," in html


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_page_can_force_the_common_bundle(client: AsyncClient):
    response = await client.get("/common")
    assert response.status_code == 200, response.text
    html = response.text

    assert f'<script src="/hljs/js/highlight.min.js{V}"></script>' in html
    assert "core.min.js" not in html
    assert 'class="language-python"' in html
    assert "/hljs/css/sunburst.min.css" in html
