"""Command-line interface for s3-dirview.

Commands:
    - list: List the folders and files directly under a directory
    - copy: Server-side copy of a single key (or folder marker)
    - link: Print a presigned download link for a file

Paths may be given either as plain paths together with --bucket, or as
s3://bucket/path URLs.
"""

from typing import Annotated, Optional

import typer

from . import __version__
from .core.exceptions import ValidationError
from .objectstorage import S3ClientManager, S3DirectoryView
from .objectstorage.listing import Entry
from .schemas import S3StorageConfig

app = typer.Typer(
    name="s3-dirview",
    help="Browse S3 buckets as directory trees.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"s3-dirview {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    S3-Dirview: folders and files on top of flat S3 keys.
    """
    pass


BucketOption = Annotated[
    Optional[str],
    typer.Option("--bucket", "-b", help="Bucket name (or use an s3:// path)"),
]
AccessKeyOption = Annotated[
    Optional[str], typer.Option("--access-key-id", help="AWS access key ID")
]
SecretKeyOption = Annotated[
    Optional[str], typer.Option("--secret-access-key", help="AWS secret access key")
]
SessionTokenOption = Annotated[
    Optional[str], typer.Option("--session-token", help="AWS session token")
]
RegionOption = Annotated[str, typer.Option("--region", help="AWS region name")]
EndpointOption = Annotated[
    Optional[str], typer.Option("--endpoint-url", help="Custom S3 endpoint URL")
]
ProfileOption = Annotated[
    Optional[str], typer.Option("--aws-profile", help="AWS CLI profile name")
]
PathStyleOption = Annotated[
    bool,
    typer.Option("--force-path-style", help="Use path-style bucket addressing"),
]


def _resolve_path(path: str, bucket: Optional[str]) -> tuple[str, str]:
    """Return (bucket, logical path) from the command arguments."""
    if path.startswith("s3://"):
        return S3ClientManager.parse_s3_path(path)
    if not bucket:
        raise ValueError("--bucket is required unless the path is an s3:// URL")
    return bucket, path


def _format_entry(entry: Entry) -> str:
    kind = "d" if entry.is_folder else "-"
    modified = entry.modified.strftime("%Y-%m-%d %H:%M:%S")
    return f"{kind} {entry.size:>12,} {modified}  {entry.name}"


@app.command("list")
def list_cmd(
    path: Annotated[str, typer.Argument(help="Directory to list")],
    bucket: BucketOption = None,
    list_version: Annotated[
        str,
        typer.Option(
            "--list-version",
            help="ListObjects protocol: v1 (marker) or v2 (continuation token)",
        ),
    ] = "v1",
    placeholder: Annotated[
        Optional[str],
        typer.Option("--placeholder", help="Placeholder object name to hide"),
    ] = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    session_token: SessionTokenOption = None,
    region_name: RegionOption = "us-east-1",
    endpoint_url: EndpointOption = None,
    aws_profile: ProfileOption = None,
    force_path_style: PathStyleOption = False,
) -> None:
    """
    List the folders and files directly under a directory.

    Examples:
        s3-dirview list s3://bucket/data --aws-profile myprofile
        s3-dirview list /data --bucket bucket --list-version v2 \
            --endpoint-url http://localhost:9000 --force-path-style
    """
    try:
        bucket, path = _resolve_path(path, bucket)
        config = S3StorageConfig(
            bucket=bucket,
            list_object_version=list_version,
            placeholder_name=placeholder,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
            force_path_style=force_path_style,
        )

        entries = S3DirectoryView.from_config(config).list(path)

        if entries:
            typer.echo(f"Found {len(entries)} entries:")
            for entry in entries:
                typer.echo(f"  {_format_entry(entry)}")
        else:
            typer.echo("No entries found.")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("copy")
def copy_cmd(
    source: Annotated[str, typer.Argument(help="Source path")],
    dest: Annotated[str, typer.Argument(help="Destination path")],
    bucket: BucketOption = None,
    directory: Annotated[
        bool,
        typer.Option(
            "--directory", help="Copy the folder marker key instead of a file"
        ),
    ] = False,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    session_token: SessionTokenOption = None,
    region_name: RegionOption = "us-east-1",
    endpoint_url: EndpointOption = None,
    aws_profile: ProfileOption = None,
    force_path_style: PathStyleOption = False,
) -> None:
    """
    Copy a single key within a bucket.

    With --directory only the folder marker ("a/dir/") is copied, not the
    objects below it.

    Examples:
        s3-dirview copy /a/f.txt /b/f.txt --bucket bucket
        s3-dirview copy s3://bucket/a/dir /b/dir --directory
        s3-dirview copy s3://bucket/a/f.txt s3://bucket/b/f.txt
    """
    try:
        bucket, source = _resolve_path(source, bucket)
        dest_bucket, dest = _resolve_path(dest, bucket)
        if dest_bucket != bucket:
            raise ValidationError(
                f"Copy must stay within one bucket: '{bucket}' -> '{dest_bucket}'"
            )
        config = S3StorageConfig(
            bucket=bucket,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
            force_path_style=force_path_style,
        )

        S3DirectoryView.from_config(config).copy(source, dest, directory)
        typer.echo(f"✓ Copied {source} -> {dest}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("link")
def link_cmd(
    path: Annotated[str, typer.Argument(help="File to link to")],
    bucket: BucketOption = None,
    expires_in: Annotated[
        int, typer.Option("--expires-in", help="Link lifetime in seconds")
    ] = 3600,
    custom_host: Annotated[
        Optional[str],
        typer.Option("--custom-host", help="Host to put in the generated link"),
    ] = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    session_token: SessionTokenOption = None,
    region_name: RegionOption = "us-east-1",
    endpoint_url: EndpointOption = None,
    aws_profile: ProfileOption = None,
    force_path_style: PathStyleOption = False,
) -> None:
    """
    Print a presigned download link for a file.

    Examples:
        s3-dirview link s3://bucket/data/report.csv --expires-in 600
        s3-dirview link /data/report.csv --bucket bucket \
            --custom-host cdn.example.org
    """
    try:
        bucket, path = _resolve_path(path, bucket)
        config = S3StorageConfig(
            bucket=bucket,
            custom_host=custom_host,
            link_expires_in=expires_in,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
            force_path_style=force_path_style,
        )

        typer.echo(S3DirectoryView.from_config(config).link(path))

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
