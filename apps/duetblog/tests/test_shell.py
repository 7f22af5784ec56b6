import json

from duet import RenderedPage, dumps_wire
from duetblog.lib.shell import PageShell, script_literal


def make_page():
    return RenderedPage(
        markup="<p>hi</p>",
        wire={"$$typeof": "$RE", "type": "p", "key": None, "props": {"children": "</script>"}},
    )


def test_script_literal_escapes_angle_brackets():
    literal = script_literal("</script><b>")
    assert "<" not in literal
    assert json.loads(literal) == "</script><b>"


def test_shell_embeds_markup_and_wire_string():
    page = make_page()
    html = PageShell().render(page)

    assert html.startswith("<p>hi</p><script>window.__INITIAL_CLIENT_JSX_STRING__ = ")
    literal = html.split(" = ", 1)[1].split("</script>", 1)[0]
    assert json.loads(literal) == dumps_wire(page.wire)


def test_shell_reuses_its_environment():
    shell = PageShell()
    shell.render(make_page())
    env = shell._env

    assert env is not None
    shell.render(make_page())
    assert shell._env is env


def test_shell_without_client_script_has_no_module_tags():
    html = PageShell().render(make_page())
    assert "importmap" not in html
    assert "/client.js" not in html


def test_shell_with_client_script_emits_import_map():
    shell = PageShell(client_script=True, import_map={"react": "https://esm.sh/react@canary"})
    html = shell.render(make_page())

    assert '<script type="importmap">' in html
    assert '"react": "https://esm.sh/react@canary"' in html
    assert '<script type="module" src="/client.js"></script>' in html
