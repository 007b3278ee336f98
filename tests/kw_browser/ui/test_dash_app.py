from __future__ import annotations

import json

from dash import Dash

from kw_browser.ui.dash_app import create_dash_app
from kw_browser.ui.ids import IDs


def _component_ids(component, out=None):
    out = set() if out is None else out
    cid = getattr(component, "id", None)
    if cid is not None:
        out.add(cid)
    children = getattr(component, "children", None)
    if isinstance(children, (list, tuple)):
        for child in children:
            _component_ids(child, out)
    elif children is not None and hasattr(children, "children"):
        _component_ids(children, out)
    return out


def test_create_dash_app_from_config(tmp_path, monkeypatch):
    monkeypatch.delenv("KW_BROWSER_EXPORT_DIR", raising=False)
    (tmp_path / "global.json").write_text(json.dumps({"ui_title": "Test KW", "export_dir": "out"}))

    app = create_dash_app(tmp_path)

    assert isinstance(app, Dash)
    assert app.title == "Test KW"
    assert (tmp_path / "out").is_dir()


def test_layout_gives_each_page_load_a_session_id(tmp_path, monkeypatch):
    monkeypatch.delenv("KW_BROWSER_EXPORT_DIR", raising=False)
    app = create_dash_app(tmp_path)

    first = app.layout()
    second = app.layout()

    ids = _component_ids(first)
    for expected in (
        IDs.Store.SESSION_ID,
        IDs.Store.QUERY_STATE,
        IDs.Control.UPLOAD,
        IDs.Control.TEXT_FILTER,
        IDs.Control.KEYWORD_TABLE,
    ):
        assert expected in ids

    def _session_store(layout):
        return next(c for c in layout.children if getattr(c, "id", None) == IDs.Store.SESSION_ID)

    assert _session_store(first).data != _session_store(second).data
