from html import escape
from typing import List, Optional, Sequence

from ..codewars import profile_page_url
from ..models.data import UserProfile, UserRecord
from ..ranking import OVERALL, available_selectors, rank_by, score_of

MEDALS = {1: "🥇", 2: "🥈", 3: "🥉"}

PAGE_STYLE = """
body { font-family: system-ui, sans-serif; margin: 2em auto; max-width: 60em; }
.controls { display: flex; gap: 0.8em; align-items: center; margin: 1em 0; }
.controls input[type=text] { flex: 1; }
table { border-collapse: collapse; width: 100%; }
th, td { border-bottom: 1px solid #ddd; padding: 0.4em 0.8em; text-align: left; }
td.score { text-align: right; font-variant-numeric: tabular-nums; }
.errors { color: #b00020; }
"""

def selector_label(selector: str) -> str:
    return selector[:1].upper() + selector[1:]

def format_score(score: int) -> str:
    return f"{score:,}"

def render_row(position: int, profile: UserProfile, selector: str) -> str:
    medal = MEDALS.get(position, "")
    url = profile_page_url(profile.username)
    return (
        "<tr>"
        f"<td><strong>#{position}</strong> {medal}</td>"
        f'<td><a href="{escape(url)}" target="_blank" rel="noopener">{escape(profile.username)}</a></td>'
        f"<td>{escape(profile.clan_name) if profile.clan_name else '—'}</td>"
        f'<td class="score">{format_score(score_of(profile, selector))}</td>'
        "</tr>"
    )

def render_rows(records: Sequence[UserRecord], selector: str) -> str:
    ranked = rank_by(records, selector)
    if not ranked:
        return "<tr><td colspan='4'>No valid data available</td></tr>"
    return "\n".join(render_row(idx + 1, profile, selector) for idx, profile in enumerate(ranked))

def render_selector(records: Sequence[UserRecord], selected: str) -> str:
    options = []
    for selector in available_selectors(records):
        chosen = " selected" if selector == selected else ""
        options.append(f'<option value="{escape(selector)}"{chosen}>{escape(selector_label(selector))}</option>')
    disabled = "" if records else " disabled"
    return (
        '<form method="get" action="/">'
        '<label for="language-select">Ranking by:</label> '
        f'<select id="language-select" name="language" onchange="this.form.submit()"{disabled}>'
        + "".join(options) +
        "</select>"
        "<noscript><button type=\"submit\">Sort</button></noscript>"
        "</form>"
    )

def render_errors(records: Sequence[UserRecord], messages: Optional[List[str]] = None) -> str:
    lines = list(messages or [])
    lines.extend(rec.message for rec in records if rec.is_error)
    if not lines:
        return '<div id="error-message" role="alert"></div>'
    items = "".join(f"<li>{escape(line)}</li>" for line in lines)
    return f'<div id="error-message" class="errors" role="alert"><ul>{items}</ul></div>'

def render_page(records: Sequence[UserRecord], selector: str = OVERALL,
                usernames: str = "", messages: Optional[List[str]] = None) -> str:
    """Full leaderboard page for one session"""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Codewars Leaderboard</title>
<style>{PAGE_STYLE}</style>
</head>
<body>
<h1>🏆 Codewars Ultimate Leaderboard</h1>
<div class="controls">
<form method="post" action="/">
<label for="username-input">Usernames:</label>
<input type="text" id="username-input" name="usernames" value="{escape(usernames)}" placeholder="e.g. CodeYourFuture, SallyMcGrath">
<button type="submit">Show Rankings</button>
</form>
{render_selector(records, selector)}
</div>
{render_errors(records, messages)}
<table aria-describedby="Leaderboard of Codewars users">
<thead><tr><th>Rank</th><th>Username</th><th>Clan</th><th>Score</th></tr></thead>
<tbody id="leaderboard-body">
{render_rows(records, selector) if records else ""}
</tbody>
</table>
</body>
</html>
"""
