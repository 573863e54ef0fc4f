from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="affirm", help="Verify files with fluent assertions")
schema_app = typer.Typer(name="schema", help="Generate manifest schema tooling")
app.add_typer(schema_app, name="schema")


@app.command()
def digest(
    file: str = typer.Argument(help="File to hash"),
    algorithm: str | None = typer.Option(
        None, "--algorithm", "-a", help="Digest algorithm (defaults to settings)"
    ),
):
    """Print the uppercase hex digest of a file."""
    from affirm.conditions.files import FileConditions
    from affirm.config import get_settings
    from affirm.digests import to_hex
    from affirm.exceptions import IllegalStateError

    settings = get_settings()
    name = algorithm or settings.default_digest_algorithm
    path = Path(file)
    if not path.is_file():
        typer.echo(f"Error: not a file: {file}", err=True)
        raise typer.Exit(1)

    files = FileConditions(chunk_size=settings.digest_chunk_size)
    try:
        hasher = files.resolve_digest(name)
    except IllegalStateError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    try:
        with files.filesystem.open_binary(path) as f:
            for chunk in iter(lambda: f.read(files.chunk_size), b""):
                hasher.update(chunk)
    except OSError as e:
        typer.echo(f"Error: unable to read {file}: {e}", err=True)
        raise typer.Exit(2)
    typer.echo(to_hex(hasher.digest()))


@app.command("check-digest")
def check_digest(
    file: str = typer.Argument(help="File to check"),
    algorithm: str = typer.Argument(help="Digest algorithm, e.g. MD5 or SHA-256"),
    expected: str = typer.Argument(help="Expected uppercase hex digest"),
):
    """Fail unless FILE has the EXPECTED digest."""
    from affirm import IllegalStateError, UncheckedIOError, assert_that_path

    try:
        assert_that_path(file).has_digest(algorithm, expected)
    except AssertionError as e:
        typer.echo(str(e).strip(), err=True)
        raise typer.Exit(1)
    except (IllegalStateError, UncheckedIOError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    typer.echo(f"{file}: OK")


@app.command()
def verify(
    manifest: str = typer.Argument(help="Path to manifest YAML"),
    junit: str | None = typer.Option(None, help="Write a junit.xml report here"),
    log_file: str | None = typer.Option(
        None, "--log-file", help="Debug log file (defaults to <junit dir>/debug.log)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Run every check of a manifest and report the failures."""
    from pydantic import ValidationError

    from affirm.config import load_manifest
    from affirm.reporting.junit import write_junit
    from affirm.runner import ManifestRunner
    from affirm.verbose import setup_logger

    manifest_path = Path(manifest)
    if not manifest_path.exists():
        typer.echo(f"Error: manifest not found: {manifest}", err=True)
        raise typer.Exit(1)

    try:
        loaded = load_manifest(manifest_path)
    except (ValidationError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger = None
    if log_file or junit or verbose:
        debug_file = None
        if log_file or junit:
            debug_file = Path(log_file) if log_file else Path(junit).parent / "debug.log"
        logger = setup_logger(
            debug_file, verbose=verbose, logger_name=f"affirm_verify_{manifest_path.stem}"
        )

    results = ManifestRunner(loaded, logger=logger).execute()

    for result in results:
        status = "PASS" if result.passed else ("ERROR" if result.error else "FAIL")
        typer.echo(f"{status} {result.name}")
        if not result.passed:
            for line in result.message.splitlines():
                typer.echo(f"    {line}")

    passed = sum(r.passed for r in results)
    typer.echo(f"{passed}/{len(results)} check(s) passed")

    if junit:
        report_path = write_junit(
            Path(junit), results, suite_name=manifest_path.stem,
            properties={"manifest": str(manifest_path)},
        )
        typer.echo(f"Report: {report_path}")

    if passed != len(results):
        raise typer.Exit(1)


@schema_app.command("generate")
def schema_generate(
    out: str = typer.Option(
        "schemas/affirm-manifest.schema.json", help="Output path for JSON Schema"
    ),
    doc: str = typer.Option("docs/manifest.md", help="Output path for schema docs"),
):
    """Generate JSON Schema and docs for the manifest YAML format."""
    from affirm.schema import write_json_schema, write_schema_doc

    out_path = Path(out)
    doc_path = Path(doc)
    write_json_schema(out_path)
    write_schema_doc(doc_path)
    typer.echo(f"Wrote schema: {out_path}")
    typer.echo(f"Wrote docs: {doc_path}")
