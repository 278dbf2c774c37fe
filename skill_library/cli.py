"""CLI entry point for skill-library"""

import json
import logging
from pathlib import Path

import click

from skill_library import __version__
from skill_library.exceptions import SkillLibraryError
from skill_library.formats import PRESET_FORMATS, detect_format, normalize_format
from skill_library.identity import generate_id
from skill_library.models import SkillLibrary
from skill_library.preferences import PREFERENCES_FILENAME, PreferencesStore
from skill_library.scanner import LibraryScanner
from skill_library.store import AppStore


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )


def _store(ctx: click.Context) -> AppStore:
    return ctx.obj["store"]


def _run_scan(ctx: click.Context, libraries_file=None, parallel=False):
    """Scan configured libraries (or those from a YAML file) into the store."""
    store = _store(ctx)
    libraries = None
    if libraries_file:
        from skill_library.config import load_libraries_file

        libraries = load_libraries_file(libraries_file)

    return store.rescan(LibraryScanner(), parallel=parallel, libraries=libraries)


def _find_skill(ctx: click.Context, skill_id: str):
    store = _store(ctx)
    if not store.skills:
        _run_scan(ctx)
    skill = store.get_skill(skill_id)
    if skill is None:
        raise click.ClickException(f"No skill with id '{skill_id}'. Run 'skill-library list' to see ids.")
    return skill


def _find_library(ctx: click.Context, library_id: str) -> SkillLibrary:
    library = _store(ctx).get_library(library_id)
    if library is None:
        raise click.ClickException(f"No library with id '{library_id}'.")
    return library


def _echo_skill_row(skill) -> None:
    title = skill.title[:28]
    click.echo(f"{skill.id:<10} {title:<30} {skill.format:<12} {skill.description[:60]}")


@click.group()
@click.version_option(version=__version__)
@click.option("--home", type=click.Path(file_okay=False, path_type=Path), help="Override state directory (default: ~/.skill-library)")
@click.option("--verbose", "-v", is_flag=True, help="Verbose logging")
@click.pass_context
def cli(ctx, home, verbose):
    """Skill Library - Browse and organize local skills across ecosystems"""
    _configure_logging(verbose)
    prefs_path = home / PREFERENCES_FILENAME if home else None
    ctx.obj = {"store": AppStore.load(PreferencesStore(prefs_path))}


@cli.command()
@click.option("--libraries-file", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Scan libraries from a YAML file instead of saved preferences")
@click.option("--parallel/--sequential", default=False, help="Scan library roots in parallel")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def scan(ctx, libraries_file, parallel, output_json):
    """Scan all active libraries and display results"""
    try:
        if not output_json:
            click.echo("🔍 Scanning skill libraries...")

        result = _run_scan(ctx, libraries_file=libraries_file, parallel=parallel)

        if output_json:
            from skill_library.exporters import JSONExporter

            click.echo(JSONExporter().export_scan_result(result))
            return

        click.echo("\n✅ Scan complete!")
        click.echo(f"   Total skills: {result.total_count}")
        for fmt, skills in result.by_format().items():
            click.echo(f"   {fmt}: {len(skills)}")

        if result.skills:
            click.echo(f"\n📋 Skills ({result.total_count}):")
            for skill in result.skills:
                click.echo(f"  - {skill.title} [{skill.format}] {skill.source_path}")

        if result.errors:
            click.echo("\n⚠️  Errors encountered:")
            for error in result.errors:
                click.echo(f"   - {error}")

    except SkillLibraryError as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()


@cli.command(name="list")
@click.option("--format", "fmt", help="Filter by format")
@click.option("--query", "-q", help="Search titles and descriptions")
@click.option("--tag", "tags", multiple=True, help="Filter by tag (repeatable)")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_skills(ctx, fmt, query, tags, output_json):
    """List skills from all active libraries"""
    store = _store(ctx)
    _run_scan(ctx)

    store.set_search_query(query or "")
    store.set_filter_format(fmt)
    store.set_filter_tags(list(tags))
    skills = store.filtered_skills()

    if output_json:
        from skill_library.exporters import JSONExporter

        click.echo(JSONExporter().export_skills(skills))
        return

    click.echo(f"📋 Skills ({len(skills)} found)")
    click.echo(f"\n{'ID':<10} {'Title':<30} {'Format':<12} {'Description'}")
    click.echo("=" * 80)
    for skill in skills:
        _echo_skill_row(skill)

    if store.error:
        click.echo(f"\n⚠️  {store.error}", err=True)


@cli.command()
@click.argument("skill_id")
@click.option("--no-content", is_flag=True, help="Only show metadata")
@click.pass_context
def show(ctx, skill_id, no_content):
    """Show a skill's metadata, folder contents and descriptor"""
    from skill_library.editing import skill_folder_contents

    skill = _find_skill(ctx, skill_id)

    click.echo(f"{skill.title} [{skill.format}]")
    click.echo(f"  ID:          {skill.id}")
    click.echo(f"  Description: {skill.description}")
    click.echo(f"  Path:        {skill.source_path}")

    items = skill_folder_contents(skill)
    if items:
        click.echo("\n📁 Folder:")
        for item in items:
            suffix = "/" if item.is_directory else ""
            click.echo(f"  {item.name}{suffix}")
            for child in item.children:
                child_suffix = "/" if child.is_directory else ""
                click.echo(f"    {child.name}{child_suffix}")

    if not no_content:
        click.echo("\n" + skill.content)


@cli.group()
def library():
    """Manage skill library folders"""
    pass


@library.command(name="list")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def library_list(ctx, output_json):
    """List configured libraries"""
    libraries = _store(ctx).preferences.libraries

    if output_json:
        click.echo(json.dumps([lib.to_dict() for lib in libraries], indent=2))
        return

    click.echo(f"📚 Libraries ({len(libraries)} configured)")
    click.echo(f"\n{'ID':<10} {'Name':<24} {'Format':<12} {'Active':<7} Path")
    click.echo("=" * 80)
    for lib in libraries:
        active = "yes" if lib.is_active else "no"
        click.echo(f"{lib.id:<10} {lib.name[:22]:<24} {lib.format:<12} {active:<7} {lib.path}")


@library.command(name="add")
@click.argument("path", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--name", help="Display name (default: folder name)")
@click.option("--format", "fmt", help=f"Format label, e.g. {', '.join(PRESET_FORMATS)} or any custom value (default: detected from folder name)")
@click.option("--inactive", is_flag=True, help="Add without scanning it")
@click.pass_context
def library_add(ctx, path, name, fmt, inactive):
    """Add a library folder"""
    store = _store(ctx)
    path = path.absolute()

    if any(Path(lib.path).absolute() == path for lib in store.preferences.libraries):
        raise click.ClickException(f"Library already configured: {path}")

    lib = SkillLibrary(
        id=generate_id(path),
        name=name or path.name or "My Skills",
        path=path,
        format=normalize_format(fmt) if fmt else detect_format(path.name),
        is_active=not inactive,
    )
    store.add_library(lib)
    if not store.preferences.has_completed_onboarding:
        store.complete_onboarding()
    store.save()

    click.echo(f"✅ Added library '{lib.name}' ({lib.format}) as {lib.id}")


@library.command(name="remove")
@click.argument("library_id")
@click.pass_context
def library_remove(ctx, library_id):
    """Remove a library (files on disk are kept)"""
    store = _store(ctx)
    lib = _find_library(ctx, library_id)
    store.remove_library(library_id)
    store.save()
    click.echo(f"🗑️  Removed library '{lib.name}'")


@library.command(name="enable")
@click.argument("library_id")
@click.pass_context
def library_enable(ctx, library_id):
    """Include a library in scans"""
    _set_library_active(ctx, library_id, True)


@library.command(name="disable")
@click.argument("library_id")
@click.pass_context
def library_disable(ctx, library_id):
    """Exclude a library from scans"""
    _set_library_active(ctx, library_id, False)


def _set_library_active(ctx, library_id: str, active: bool) -> None:
    store = _store(ctx)
    lib = _find_library(ctx, library_id)
    store.update_library(library_id, is_active=active)
    store.save()
    click.echo(("Enabled" if active else "Disabled") + f" library '{lib.name}'")


@library.command(name="set-format")
@click.argument("library_id")
@click.argument("fmt", metavar="FORMAT")
@click.pass_context
def library_set_format(ctx, library_id, fmt):
    """Change the format label of a library"""
    store = _store(ctx)
    lib = _find_library(ctx, library_id)
    updated = store.update_library(library_id, format=normalize_format(fmt))
    store.save()
    click.echo(f"Library '{lib.name}' format: {lib.format} → {updated.format}")


@cli.command()
@click.argument("name")
@click.option("--library", "library_id", help="Target library id (default: first active library)")
@click.pass_context
def new(ctx, name, library_id):
    """Create a new skill from the template"""
    from skill_library.editing import create_skill

    store = _store(ctx)
    if library_id:
        lib = _find_library(ctx, library_id)
    else:
        lib = next((lib for lib in store.preferences.libraries if lib.is_active), None)
        if lib is None:
            raise click.ClickException("No active library. Add one with 'skill-library library add PATH'.")

    try:
        skill = create_skill(Path(lib.path), name, library_format=lib.format)
    except SkillLibraryError as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()

    store.add_skill(skill)
    click.echo(f"✅ Created skill '{skill.title}' ({skill.id}) at {skill.source_path}")


@cli.command()
@click.argument("skill_id")
@click.pass_context
def edit(ctx, skill_id):
    """Edit a skill's descriptor in $EDITOR"""
    from skill_library.editing import save_skill_content

    store = _store(ctx)
    skill = _find_skill(ctx, skill_id)

    edited = click.edit(skill.content, extension=".md")
    if edited is None or edited == skill.content:
        click.echo("No changes.")
        return

    try:
        updated = save_skill_content(skill, edited)
    except SkillLibraryError as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()

    store.update_skill(
        skill.id,
        content=updated.content,
        title=updated.title,
        description=updated.description,
        last_modified=updated.last_modified,
    )
    click.echo(f"💾 Saved '{updated.title}'")


@cli.command()
@click.argument("skill_id")
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation")
@click.pass_context
def delete(ctx, skill_id, yes):
    """Delete a skill folder from disk"""
    from skill_library.editing import delete_skill

    store = _store(ctx)
    skill = _find_skill(ctx, skill_id)

    if not yes:
        click.confirm(f"Delete '{skill.title}' at {skill.skill_dir}?", abort=True)

    try:
        delete_skill(skill)
    except SkillLibraryError as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()

    store.remove_skill(skill.id)
    click.echo(f"🗑️  Deleted '{skill.title}'")


@cli.command()
@click.option("--format", "output_format", type=click.Choice(["json", "markdown"]), default="markdown", help="Export format")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Output file path")
@click.option("--include-content", is_flag=True, help="Include descriptor content (JSON only)")
@click.pass_context
def export(ctx, output_format, output, include_content):
    """Export the skill catalog to JSON or Markdown"""
    from skill_library.exporters import JSONExporter, MarkdownExporter

    click.echo(f"📦 Exporting to {output_format}...")
    result = _run_scan(ctx)

    if output_format == "json":
        exporter = JSONExporter(include_content=include_content)
        default_filename = "skill-library.json"
    else:
        exporter = MarkdownExporter()
        default_filename = "skill-library.md"

    output_path = output or Path.cwd() / default_filename
    try:
        exporter.export_to_file(result, output_path)
    except OSError as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()

    click.echo(f"✅ Exported to {output_path}")
    click.echo(f"   {result.total_count} skills")


@cli.command()
@click.argument("theme", required=False, type=click.Choice(["dark", "light", "system"]))
@click.pass_context
def theme(ctx, theme):
    """Show or set the UI theme"""
    store = _store(ctx)
    if theme is None:
        click.echo(store.preferences.theme)
        return
    store.set_preferences(theme=theme)
    store.save()
    click.echo(f"Theme set to {theme}")


@cli.command()
@click.pass_context
def tui(ctx):
    """Launch interactive TUI dashboard"""
    try:
        from skill_library.tui.app import SkillLibraryTUI

        app = SkillLibraryTUI(store=_store(ctx))
        app.run()

    except ImportError as e:
        click.echo("❌ TUI requires 'textual' package. Install with: pip install textual", err=True)
        click.echo(f"   Error: {e}", err=True)
        raise click.Abort()


def main():
    cli()


if __name__ == "__main__":
    main()
