"""Shared page factories for crawler tests.

Pages mimic the bits of a Gwent profile that the extractor looks at. Each
fragment can be dropped or replaced through keyword overrides.
"""

import json

PRIVATE_PAGE = """<html><body>
<div class="c-profile-private"><h2>THIS PLAYER PROFILE IS PRIVATE</h2></div>
<div class="l-player-details__rank"><strong>5</strong></div>
<span>9,999 MMR</span>
</body></html>"""

DEFAULT_ROW = ["30", "0", "0", "0", "0", "0", "0", "0"]

_UNSET = object()


def stats_json(overall, factions=None):
    factions = factions or {}
    return json.dumps({
        "overall": overall,
        "factions": [{"slug": slug, "count": count} for slug, count in factions.items()],
    }, separators=(",", ":"))


def make_profile_page(wins=_UNSET, current=_UNSET, mmr="2,345", losses="1,050",
                      draws="12", rank="14", prestige="3", level="27"):
    """Build a public profile page. Pass None to leave a fragment out.

    Numeric overrides are inserted as text, so malformed values can be tested.
    """
    if wins is _UNSET:
        wins = stats_json(1532, {"NR": 700, "SK": 832})
    if current is _UNSET:
        current = stats_json(88, {"NR": 40, "SK": 48})

    parts = ["<html><head><title>Gwent profile</title></head><body>"]
    if prestige is not None:
        parts.append(
            f'<div class="l-player-details__prestige l-player-details__prestige--{prestige}"><strong>\n'
            f'        {level}</strong></div>'
        )
    if rank is not None:
        parts.append(f'<div class="l-player-details__rank"><strong>{rank}</strong></div>')
    if mmr is not None:
        parts.append(f'<div class="l-player-details__table-mmr">{mmr} MMR</div>')

    parts.append('<table class="c-statistics-table">')
    parts.append('<tr><td>Wins</td><td>88 matches</td></tr>')
    if losses is not None:
        parts.append(f'<tr><td>Losses</td><td>{losses} matches</td></tr>')
    if draws is not None:
        parts.append(f'<tr><td>Draws</td><td>{draws} matches</td></tr>')
    parts.append('</table>')

    parts.append('<script>')
    if wins is not None:
        parts.append(f'var profileDataWins = {wins};')
    if current is not None:
        parts.append(f'var profileDataCurrent = {current};')
    parts.append('</script></body></html>')
    return "\n".join(parts)


def write_id_file(path, identifiers):
    path.write_text("".join(f"{identifier}\n" for identifier in identifiers), encoding="utf-8")
    return str(path)


def read_rows(path):
    with open(path, "r", encoding="utf-8") as f:
        return [line.rstrip("\r\n").split(",") for line in f if line.strip()]
