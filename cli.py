# cli.py
import typer
from pathlib import Path
from typing import List, Optional

from pagekit.core.context import Context
from pagekit.core.settings import load_settings

from plugins.core_hljs import HljsLang, HljsTheme, LibraryVariant
from plugins.core_hljs.config import HljsSettings
from plugins.core_hljs.languages import UnknownLanguageError
from plugins.core_hljs.preferences import get_preferences
from plugins.core_hljs.resolver import resolve_assets
from plugins.core_hljs.themes import UnknownThemeError

app = typer.Typer(name="pagekit", help="pagekit command-line interface")
hljs_app = typer.Typer(name="hljs", help="Inspect HighlightJS catalogs and resolved assets.")
app.add_typer(hljs_app)


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind."),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
):
    """Run the web application with uvicorn."""
    import uvicorn
    uvicorn.run("pagekit.main:app", host=host, port=port, reload=reload)


@hljs_app.command("languages")
def list_languages(
    common: bool = typer.Option(False, "--common", help="Only languages of the common bundle.")
):
    """List the supported languages."""
    for language in HljsLang:
        if common and not language.in_common_bundle:
            continue
        typer.echo(language.value)


@hljs_app.command("themes")
def list_themes():
    """List the supported themes."""
    default = HljsTheme.default()
    for theme in HljsTheme:
        suffix = " (default)" if theme is default else ""
        typer.echo(f"{theme.value}{suffix}")


@hljs_app.command("resolve")
def resolve(
    langs: List[str] = typer.Option([], "--lang", "-l", help="Enable a language (repeatable)."),
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Theme for the page."),
    library: Optional[LibraryVariant] = typer.Option(None, "--library", help="Force a library variant."),
    tabsize: Optional[int] = typer.Option(None, "--tabsize", help="Override the configured tab size."),
    disabled: bool = typer.Option(False, "--disabled", help="Disable highlighting for the page."),
    settings_path: Optional[Path] = typer.Option(None, "--settings", help="Settings file to read [hljs] from."),
):
    """
    Print the assets a page with the given preferences would load.
    """
    config = load_settings(settings_path).hljs
    if tabsize is not None:
        config = HljsSettings(**{**config.model_dump(mode="json"), "tabsize": tabsize})

    prefs = get_preferences(Context())
    try:
        for lang in langs:
            prefs.enable_language(HljsLang.from_name(lang))
        if theme:
            prefs.set_theme(HljsTheme.from_name(theme))
    except (UnknownLanguageError, UnknownThemeError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    if library is not None:
        prefs.force_variant(library)
    if disabled:
        prefs.disable()

    manifest = resolve_assets(prefs, config)
    if manifest.is_empty:
        typer.echo("No assets: nothing to highlight.")
        return
    typer.echo(manifest.render())


if __name__ == "__main__":
    app()
