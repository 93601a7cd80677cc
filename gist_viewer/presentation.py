"""Turn controller state and a filter value into rows, messages and HTML."""

from datetime import datetime
from html import escape

from gist_viewer.config import Settings
from gist_viewer.models.schemas import Gist, GistListView, GistRow
from gist_viewer.services.controller import Errored, GistListController, Loading
from gist_viewer.services.filters import matches

NO_DESCRIPTION = "(No description)"
NO_DATE = "N/A"

ERROR_TIP = (
    "Tip - check your network connection, that the GitHub username ('{username}') "
    "is valid, or if the API limit has been reached. "
    "The API may also be temporarily unavailable."
)


def _date(value: datetime | None) -> str:
    if value is None:
        return NO_DATE
    return value.strftime("%Y-%m-%d")


def _description(value: object) -> str:
    if isinstance(value, str) and value:
        return value
    return NO_DESCRIPTION


def to_row(gist: Gist) -> GistRow:
    """Display values for one gist."""
    return GistRow(
        id=gist.id,
        description=_description(gist.description),
        html_url=gist.html_url,
        file_count=len(gist.files) if gist.files else 0,
        updated=_date(gist.updated_at),
        created=_date(gist.created_at),
    )


def build_view(controller: GistListController, filter_value: str = "") -> GistListView:
    """Build the render state of the gist list for ``filter_value``."""
    since = controller.since_threshold or ""
    since_date = since[:10]
    since_suffix = f"updated since {since_date}" if since_date else "updated at any time"
    state = controller.state

    view = GistListView(
        username=controller.username,
        status="ready",
        loading=False,
        errored=False,
        since_threshold=since,
        since_date=since_date,
        filter=filter_value,
    )

    if isinstance(state, Loading):
        view.status = "loading"
        view.loading = True
        view.message = f"Loading gists {since_suffix}..."
        return view

    if isinstance(state, Errored):
        view.status = "errored"
        view.errored = True
        view.error_message = state.message
        view.message = state.message
        return view

    rows = [to_row(gist) for gist in state.gists if matches(gist.description, filter_value)]
    view.total_count = len(state.gists)
    view.matched_count = len(rows)
    view.gists = rows

    if not state.gists:
        view.message = f"No gists found {since_suffix}."
    elif not rows:
        view.message = (
            f"No gists found matching your filter criteria (and {since_suffix})."
        )
    return view


def _render_table(view: GistListView) -> str:
    lines = [
        "<table>",
        "<thead><tr><th>Description</th><th>Files</th>"
        "<th>Updated</th><th>Created</th></tr></thead>",
        "<tbody>",
    ]
    for row in view.gists:
        description = escape(row.description)
        if row.html_url:
            description = (
                f'<a href="{escape(row.html_url)}" target="_blank" '
                f'rel="noopener noreferrer">{description}</a>'
            )
        lines.append(
            f"<tr><td>{description}</td><td>{row.file_count}</td>"
            f"<td>{escape(row.updated)}</td><td>{escape(row.created)}</td></tr>"
        )
    lines.extend(["</tbody>", "</table>"])
    return "\n".join(lines)


def _render_section(view: GistListView) -> str:
    if view.errored:
        return "\n".join(
            [
                "<div>",
                "<p><b>Failed to fetch gists data.</b></p>",
                f"<p><i>{escape(view.error_message)}</i></p>",
                f"<p>{escape(ERROR_TIP.format(username=view.username))}</p>",
                "</div>",
            ]
        )

    parts = []
    if view.loading:
        parts.append(f"<p>{escape(view.message or '')}</p>")
    else:
        if view.gists:
            parts.append(_render_table(view))
        if view.message:
            parts.append(f"<p>{escape(view.message)}</p>")
    return "<div>\n" + "\n".join(parts) + "\n</div>"


def render_page(view: GistListView, settings: Settings) -> str:
    """Render the full HTML page for the gist list."""
    profile_url = f"https://github.com/{view.username}"
    repo_url = f"{profile_url}/{settings.repo_name}"
    gists_url = f"https://gist.github.com/{view.username}"

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{escape(settings.app_name)}</title>
</head>
<body>
<p><a href="{escape(repo_url)}">View source on GitHub</a></p>

<h2>User links</h2>
<p>User: <b>@{escape(view.username)}</b></p>
<p>
<a href="{escape(profile_url)}">Profile</a>
|
<a href="{escape(gists_url)}">Gists</a>
</p>

<h2>List of Gists</h2>
<p><i>Every time the list is refreshed, the latest Gist details will be pulled in.</i></p>

<form method="get" action="/">
<input type="text" name="filter" value="{escape(view.filter)}" placeholder="Filter by description">
<button type="submit">Filter</button>
</form>
<form method="post" action="/refresh">
<button type="submit">Refresh</button>
</form>

<br>

<section id="gists-widget">
{_render_section(view)}
</section>
</body>
</html>
"""
