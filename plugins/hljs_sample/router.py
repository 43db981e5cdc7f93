# plugins/hljs_sample/router.py

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from pagekit.core.dependencies import Service
from pagekit.core.page import Page

from plugins.core_hljs import HighlightJS, HljsLang, Snippet

sample_router = APIRouter(tags=["HighlightJS Sample"])

HELLO_WORLD = r'''
// This is the main function.
fn main() {
    // Print text to the console.
    println!("Hello World!");
}
'''

HELLO_PYTHON = r'''
def main():
    print("Hello World!")
'''


@sample_router.get("/", response_class=HTMLResponse)
async def hljs_sample(request: Request) -> HTMLResponse:
    page = Page(request, title="HighlightJS sample").with_in(
        "content",
        Snippet.with_(HljsLang.RUST, HELLO_WORLD),
    )
    return await page.response()


@sample_router.get("/common", response_class=HTMLResponse)
async def hljs_common_sample(
    request: Request,
    hljs: HighlightJS = Depends(Service("hljs")),
) -> HTMLResponse:
    """Same snippets, served with the common bundle instead of per-language files."""
    page = (
        Page(request, title="HighlightJS common bundle")
        .with_in("content", Snippet.with_(HljsLang.RUST, HELLO_WORLD))
        .with_in("content", Snippet.with_(HljsLang.PYTHON, HELLO_PYTHON))
    )
    hljs.force_common_lib(page.context)
    return await page.response()
