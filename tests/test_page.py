# tests/test_page.py

import pytest

from pagekit.core.assets import Assets, HeadScript, JavaScript, JavaScriptMode, StyleSheet
from pagekit.core.component import Html
from pagekit.core.context import Context
from pagekit.core.contracts import HOOK_AFTER_PREPARE_BODY
from pagekit.core.hooks import HookManager
from pagekit.core.page import Page


class TestAssets:

    def test_versioned_urls(self):
        assert JavaScript(path="/js/app.js", version="1.2").url == "/js/app.js?v=1.2"
        assert JavaScript(path="/js/app.js?x=1", version="1.2").url == "/js/app.js?x=1&v=1.2"
        assert StyleSheet(path="/css/app.css").url == "/css/app.css"

    def test_render_modes(self):
        normal = JavaScript(path="/a.js", mode=JavaScriptMode.NORMAL)
        deferred = JavaScript(path="/b.js")
        assert normal.render() == '<script src="/a.js"></script>'
        assert deferred.render() == '<script src="/b.js" defer></script>'

    def test_stylesheet_media(self):
        sheet = StyleSheet(path="/print.css", media="print")
        assert sheet.render() == '<link rel="stylesheet" href="/print.css" media="print">'

    def test_first_entry_wins_for_duplicate_keys(self):
        assets: Assets[JavaScript] = Assets()
        assert assets.add(JavaScript(path="/a.js", version="1"))
        assert not assets.add(JavaScript(path="/a.js", version="2"))
        assets.add(JavaScript(path="/b.js"))

        assert [a.url for a in assets] == ["/a.js?v=1", "/b.js"]

    def test_remove(self):
        assets: Assets[HeadScript] = Assets()
        assets.add(HeadScript(name="init", code="init();"))
        assert assets.remove("init")
        assert not assets.remove("init")
        assert len(assets) == 0

    def test_urls_are_escaped(self):
        sheet = StyleSheet(path='/x.css"><script>')
        assert "<script>" not in sheet.render()


class TestContext:

    def test_extension_is_created_once_per_context(self):
        class Counter:
            def __init__(self):
                self.value = 0

        cx = Context()
        assert not cx.has_extension(Counter)
        cx.extension(Counter).value += 1
        cx.extension(Counter).value += 1

        assert cx.extension(Counter).value == 2
        assert Context().extension(Counter).value == 0

    def test_params(self):
        cx = Context()
        assert cx.get_param("missing", "fallback") == "fallback"
        cx.set_param("key", 42)
        assert cx.get_param("key") == 42


class Recorder(Html):
    """Html component that records the order of its lifecycle calls."""
    def __init__(self, name, log, **kwargs):
        super().__init__(f"<p>{name}</p>", **kwargs)
        self.name = name
        self.log = log

    def before_prepare(self, context):
        self.log.append(f"before:{self.name}")

    def prepare(self, context):
        self.log.append(f"prepare:{self.name}")
        return super().prepare(context)


@pytest.mark.asyncio
class TestPage:

    async def test_components_render_by_weight(self):
        log = []
        page = (
            Page(hook_manager=HookManager())
            .with_in("content", Recorder("heavy", log, weight=10))
            .with_in("content", Recorder("light", log, weight=-5))
            .with_in("content", Recorder("plain", log))
        )

        html = await page.render()

        assert html.index("<p>light</p>") < html.index("<p>plain</p>") < html.index("<p>heavy</p>")
        assert log == [
            "before:light", "prepare:light",
            "before:plain", "prepare:plain",
            "before:heavy", "prepare:heavy",
        ]

    async def test_non_renderable_component_is_skipped(self):
        log = []
        page = Page(hook_manager=HookManager()).with_in(
            "content", Recorder("hidden", log, renderable=lambda cx: False)
        )

        html = await page.render()

        assert "hidden" not in html
        assert log == []

    async def test_after_prepare_body_runs_after_all_components(self):
        log = []
        hook_manager = HookManager()

        async def after_body(page: Page) -> Page:
            log.append("after_prepare_body")
            page.context.add_stylesheet(StyleSheet(path="/late.css"))
            return page

        hook_manager.add_implementation(HOOK_AFTER_PREPARE_BODY, after_body)
        page = (
            Page(hook_manager=hook_manager)
            .with_in("header", Recorder("a", log))
            .with_in("content", Recorder("b", log))
        )

        html = await page.render()

        assert log[-1] == "after_prepare_body"
        assert log.count("after_prepare_body") == 1
        assert '<link rel="stylesheet" href="/late.css">' in html

    async def test_assets_are_rendered_in_head(self):
        page = Page(hook_manager=HookManager(), title="Demo <1>")
        page.context.add_javascript(JavaScript(path="/app.js", mode=JavaScriptMode.NORMAL))
        page.context.add_head_script(HeadScript(name="init", code="start();"))

        html = await page.render()
        head = html.split("</head>")[0]

        assert "<title>Demo &lt;1&gt;</title>" in head
        assert head.index('<script src="/app.js"></script>') < head.index("<script>start();</script>")
