# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import asyncio
import logging
from typing import Any, Coroutine, Optional, TypeVar

import typer

from ..config import BACKENDS, StorageSettings
from ..domain.errors import ConfigurationError, PortaStoreError, StorageNotFoundError
from ..domain.options import (
    CreationCollisionOption,
    ExistenceCheckResult,
    NameCollisionOption,
    RootCategory,
)
from ..services import File, FileSystem, Folder

from ..logging_config import setup_logging

setup_logging()

app = typer.Typer(help="portastore CLI - uniform file/folder access over storage backends")

logger = logging.getLogger(__name__)

T = TypeVar("T")

ROOTS = {c.value: c for c in RootCategory}

CREATION_OPTIONS = {
    "unique": CreationCollisionOption.GENERATE_UNIQUE_NAME,
    "replace": CreationCollisionOption.REPLACE_EXISTING,
    "fail": CreationCollisionOption.FAIL_IF_EXISTS,
    "open": CreationCollisionOption.OPEN_IF_EXISTS,
}

NAME_OPTIONS = {
    "unique": NameCollisionOption.GENERATE_UNIQUE_NAME,
    "replace": NameCollisionOption.REPLACE_EXISTING,
    "fail": NameCollisionOption.FAIL_IF_EXISTS,
}


# ------------------------------
# Helpers
# ------------------------------


def _choice(value: str, options: dict[str, Any], what: str) -> Any:
    """Look up a CLI keyword; Typer BadParameter for anything unknown."""
    key = (value or "").strip().lower()
    if key not in options:
        raise typer.BadParameter(
            f"Unknown {what}: {value}. Valid options: {', '.join(sorted(options))}"
        )
    return options[key]


def _run(coro: Coroutine[Any, Any, T]) -> T:
    """Run one storage operation; library errors become a clean exit 1."""
    try:
        return asyncio.run(coro)
    except (PortaStoreError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _fs(ctx: typer.Context) -> FileSystem:
    return ctx.obj


def _root(ctx: typer.Context, root: str) -> Folder:
    category = _choice(root, ROOTS, "root")
    fs = _fs(ctx)
    return fs.local_storage() if category is RootCategory.LOCAL else fs.roaming_storage()


def _segments(path: str) -> list[str]:
    return [p for p in (path or "").split("/") if p]


async def _walk(folder: Folder, segments: list[str]) -> Folder:
    for name in segments:
        folder = await folder.get_folder(name)
    return folder


async def _split(folder: Folder, path: str) -> tuple[Folder, str]:
    """Resolve everything but the last segment; return (parent, last name)."""
    segments = _segments(path)
    if not segments:
        raise typer.BadParameter("PATH must name an entry below the root")
    return await _walk(folder, segments[:-1]), segments[-1]


# ------------------------------
# CLI Commands
# ------------------------------


@app.callback()
def main(
    ctx: typer.Context,
    backend: Optional[str] = typer.Option(
        None, "--backend", help=f"Storage backend: {', '.join(sorted(BACKENDS))}"
    ),
    local_root: Optional[str] = typer.Option(
        None, "--local-root", help="Path of the local storage root"
    ),
    roaming_root: Optional[str] = typer.Option(
        None, "--roaming-root", help="Path of the roaming storage root"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Settings come from PORTASTORE_* environment variables; options override them.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    settings = StorageSettings.from_env().with_overrides(
        backend=backend.lower() if backend else None,
        local_root=local_root,
        roaming_root=roaming_root,
    )
    try:
        ctx.obj = FileSystem.from_settings(settings)
    except ConfigurationError as e:
        raise typer.BadParameter(str(e))


@app.command()
def roots(ctx: typer.Context):
    """
    Show where the well-known storage roots live.
    """
    fs = _fs(ctx)
    typer.echo(f"local: {fs.local_storage().path}")
    typer.echo(f"roaming: {fs.roaming_storage().path}")


@app.command("ls")
def list_entries(
    ctx: typer.Context,
    path: str = typer.Argument("", help="Folder below the root ('a/b'); empty for the root"),
    root: str = typer.Option("local", "--root", help="local or roaming"),
):
    """
    List the folders (with a trailing '/') and files of a folder.
    """
    base = _root(ctx, root)

    async def go() -> tuple[list[Folder], list[File]]:
        folder = await _walk(base, _segments(path))
        return await folder.list_folders(), await folder.list_files()

    folders, files = _run(go())
    for name in sorted(f.name for f in folders):
        typer.echo(f"{name}/")
    for name in sorted(f.name for f in files):
        typer.echo(name)


@app.command()
def mkdir(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Folder to create, relative to the root"),
    root: str = typer.Option("local", "--root", help="local or roaming"),
    collision: str = typer.Option(
        "open", "--collision", help="unique, replace, fail or open"
    ),
):
    """
    Create a folder (its parent must exist).
    """
    base = _root(ctx, root)
    option = _choice(collision, CREATION_OPTIONS, "collision option")

    async def go() -> Folder:
        parent, name = await _split(base, path)
        return await parent.create_folder(name, option)

    created = _run(go())
    typer.echo(created.path)


@app.command()
def write(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="File to write, relative to the root"),
    text: str = typer.Argument(..., help="Text content"),
    root: str = typer.Option("local", "--root", help="local or roaming"),
    collision: str = typer.Option(
        "replace", "--collision", help="unique, replace, fail or open"
    ),
):
    """
    Create a file and write TEXT into it.
    """
    base = _root(ctx, root)
    option = _choice(collision, CREATION_OPTIONS, "collision option")

    async def go() -> File:
        parent, name = await _split(base, path)
        f = await parent.create_file(name, option)
        await f.write_text(text)
        return f

    written = _run(go())
    typer.echo(written.path)


@app.command()
def cat(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="File to print, relative to the root"),
    root: str = typer.Option("local", "--root", help="local or roaming"),
):
    """
    Print the text content of a file.
    """
    base = _root(ctx, root)

    async def go() -> str:
        parent, name = await _split(base, path)
        return await (await parent.get_file(name)).read_text()

    typer.echo(_run(go()), nl=False)


@app.command()
def rm(
    ctx: typer.Context,
    path: str = typer.Argument("", help="File or folder to delete, relative to the root"),
    root: str = typer.Option("local", "--root", help="local or roaming"),
):
    """
    Delete a file, or a folder with everything in it.
    """
    base = _root(ctx, root)

    async def go() -> str:
        if not _segments(path):
            # deleting the root itself; the handle refuses
            await base.delete()
            return base.path
        parent, name = await _split(base, path)
        kind = await parent.check_exists(name)
        if kind is ExistenceCheckResult.NOT_FOUND:
            raise StorageNotFoundError(f"No such file or folder: {path}")
        if kind is ExistenceCheckResult.FILE_EXISTS:
            f = await parent.get_file(name)
            await f.delete()
            return f.path
        folder = await parent.get_folder(name)
        await folder.delete()
        return folder.path

    typer.echo(f"Deleted {_run(go())}")


@app.command()
def mv(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="File to rename, relative to the root"),
    new_name: str = typer.Argument(..., help="New file name (same folder)"),
    root: str = typer.Option("local", "--root", help="local or roaming"),
    collision: str = typer.Option("fail", "--collision", help="unique, replace or fail"),
):
    """
    Rename a file inside its folder.
    """
    base = _root(ctx, root)
    option = _choice(collision, NAME_OPTIONS, "collision option")

    async def go() -> File:
        parent, name = await _split(base, path)
        return await (await parent.get_file(name)).rename(new_name, option)

    renamed = _run(go())
    typer.echo(renamed.path)
