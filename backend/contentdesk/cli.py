# contentdesk/cli.py
import click
from flask import current_app
from flask.cli import AppGroup
from contentdesk.application.content import list_content, publish_and_notify, publish_content
from contentdesk.extensions import get_gateway, get_store
from contentdesk.utils.time import isoformat

content_cli = AppGroup("content", help="Inspect and publish content items.")

EXTERNAL_DOC_URL = "https://docs.google.com/document/d/{}"


@content_cli.command("list")
@click.option("--published/--drafts", default=None, help="Only published items or only drafts.")
def list_command(published):
    """Print a summary of content items."""
    items = list_content(store=get_store(), published=published)
    if not items:
        click.echo("No content found.")
        return

    for index, item in enumerate(items, start=1):
        click.echo(f"[{index}] {item.topic}")
        click.echo(f"    id:        {item.id}")
        click.echo(f"    status:    {item.status}")
        click.echo(f"    approved:  {isoformat(item.date_approved)}")
        if item.published:
            click.echo(f"    published: {isoformat(item.date_published)}")
        if item.external_doc_ref:
            click.echo(f"    document:  {EXTERNAL_DOC_URL.format(item.external_doc_ref)}")


@content_cli.command("publish")
@click.argument("content_id")
@click.option("--notify", is_flag=True, help="Forward to the configured webhook.")
def publish_command(content_id, notify):
    """Publish one content item."""
    if not notify:
        item = publish_content(store=get_store(), content_id=content_id)
        click.echo(f"Published {item.id} ({item.topic})")
        return

    outcome = publish_and_notify(
        store=get_store(),
        gateway=get_gateway(),
        content_id=content_id,
        target_url=current_app.config.get("NOTIFY_WEBHOOK_URL"),
        timeout_ms=current_app.config["NOTIFY_TIMEOUT_MS"],
    )
    result = outcome.to_dict()
    click.echo(f"Published {outcome.item.id} ({outcome.item.topic})")
    click.echo(f"Forwarded: {'yes' if result['forwarded'] else 'no'}")
    for key in ("reason", "forwardStatus", "forwardError"):
        if key in result:
            click.echo(f"{key}: {result[key]}")
