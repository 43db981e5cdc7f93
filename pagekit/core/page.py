# pagekit/core/page.py

import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional

import jinja2
from fastapi.responses import HTMLResponse
from markupsafe import Markup
from starlette.requests import Request

from pagekit.core.component import ComponentInterface
from pagekit.core.context import Context
from pagekit.core.contracts import HookManager, HOOK_AFTER_PREPARE_BODY

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=jinja2.select_autoescape(["html", "xml"]),
    enable_async=True,
    undefined=jinja2.StrictUndefined,
)


class Page:
    """
    A server-rendered page made of named regions of components.

        page = Page(request).with_in("content", Html("<h1>Hello</h1>"))
        html = await page.render()
    """
    def __init__(
        self,
        request: Optional[Request] = None,
        hook_manager: Optional[HookManager] = None,
        title: Optional[str] = None,
        template: str = "page.html",
    ):
        self.context = Context(request)
        self.title = title
        self.template = template
        self.language = "en"
        self._regions: Dict[str, List[ComponentInterface]] = defaultdict(list)
        if hook_manager is None and request is not None:
            hook_manager = request.app.state.container.resolve("hook_manager")
        self._hook_manager = hook_manager

    # --- Builder ---

    def add_in(self, region: str, component: ComponentInterface) -> None:
        self._regions[region].append(component)

    def with_in(self, region: str, component: ComponentInterface) -> "Page":
        self.add_in(region, component)
        return self

    def with_title(self, title: str) -> "Page":
        self.title = title
        return self

    def components(self, region: str) -> List[ComponentInterface]:
        return list(self._regions.get(region, []))

    # --- Rendering ---

    def _prepare_region(self, region: str) -> Markup:
        # sorted() is stable: equal weights keep insertion order
        components = sorted(self._regions[region], key=lambda c: c.weight)
        parts = []
        for component in components:
            if not component.is_renderable(self.context):
                continue
            component.before_prepare(self.context)
            parts.append(component.prepare(self.context))
        return Markup("\n").join(parts)

    def prepare_body(self) -> Dict[str, Markup]:
        return {region: self._prepare_region(region) for region in list(self._regions)}

    async def render(self) -> str:
        regions = self.prepare_body()

        if self._hook_manager is not None:
            await self._hook_manager.filter(HOOK_AFTER_PREPARE_BODY, self)
        else:
            logger.debug("Page rendered without a hook manager; 'after_prepare_body' not fired.")

        template = _jinja_env.get_template(self.template)
        return await template.render_async(
            page=self,
            context=self.context,
            regions=regions,
        )

    async def response(self, status_code: int = 200) -> HTMLResponse:
        return HTMLResponse(await self.render(), status_code=status_code)
