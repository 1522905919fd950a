"""Guide tab: filter pattern syntax reference."""

from __future__ import annotations

from textual.containers import VerticalScroll
from textual.widgets import Markdown

GUIDE = """\
# Filter patterns

One directive per line. The first directive that decides wins.

| Directive | Meaning |
|-----------|---------|
| `Shocking Facts` | Hide posts containing the words (case-insensitive, whole words) |
| `/\\bTop [0-9]+/i` | Hide posts matching the regular expression |
| `!important` | Keep posts containing the word, even if a later line would hide them |
| `$react Jane Doe` | Hide posts shown because Jane Doe reacted to them |
| `!$react /^Jane/` | Keep posts reacted to by anyone matching the expression |

- `;` starts a comment; write `\\;` for a literal semicolon.
- Semicolons inside a leading `/.../` expression are part of it.
- Expressions follow browser syntax, including `\\p{Lu}` and `(?<name>...)`.
  Flags `i`, `m`, `s` work as usual; `v` enables set operations like `[\\w--\\d]`.
- Curly quotes in posts match straight quotes in patterns.
- Indented lines are grouped under the line above; they are still checked in
  the order they appear.
- Lines with an invalid regular expression are ignored.

When no directive decides, the options "hide suggested posts" and
"hide posts with content credentials" apply.
"""


class GuideTab(VerticalScroll):
    def compose(self):
        yield Markdown(GUIDE)
