"""Bootstrap shell - wraps server markup with the client hand-off scripts."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from duet import RenderedPage, dumps_wire


def script_literal(value: object) -> str:
    """JSON literal that is safe inside an inline <script>."""
    return json.dumps(value, ensure_ascii=False).replace("<", "\\u003c")


@dataclass
class PageShell:
    """Renders the HTML document sent for a full page load.

    The wire tree travels as a JSON string in
    ``window.__INITIAL_CLIENT_JSX_STRING__``; the import map and module
    script are only emitted when a client script is configured.

    Usage:
        shell = PageShell(client_script=True)
        html = shell.render(await render_page(root))
    """

    template: str = "shell.html.j2"
    client_script: bool = False
    import_map: dict[str, str] = field(default_factory=dict)

    # Template loader (defaults to built-in templates)
    _env: Environment | None = field(default=None, repr=False)

    def render(self, page: RenderedPage) -> str:
        """Render the full HTML document for a page."""
        tmpl = self._get_env().get_template(self.template)
        return tmpl.render(
            markup=page.markup,
            wire_literal=script_literal(dumps_wire(page.wire)),
            client_script=self.client_script,
            import_map=script_literal({"imports": self.import_map}),
        )

    def _get_env(self) -> Environment:
        """Get or create Jinja2 environment."""
        if self._env is not None:
            return self._env

        # Default: look in duetblog/templates/
        templates_dir = Path(__file__).parent.parent / "templates"
        self._env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        return self._env
