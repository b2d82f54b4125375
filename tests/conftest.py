import threading
import time

import pytest
import requests

from result_checker.resolvers import PortalResolver

PORTAL_URL = "https://results.example.test/InterResults.aspx"


def entry_page(viewstate="VS123", generator="GEN456", validation="EV789"):
    fields = []
    for field_id, value in (("__VIEWSTATE", viewstate),
                            ("__VIEWSTATEGENERATOR", generator),
                            ("__EVENTVALIDATION", validation)):
        if value is None:
            continue
        fields.append(f'<input type="hidden" name="{field_id}" id="{field_id}" value="{value}" />')
    return f"<html><body><form>{''.join(fields)}</form></body></html>"


def result_page(name="", rows=()):
    body_rows = "".join(
        "<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows
    )
    return f"""
    <html><body>
      <span id="ContentPlaceHolder1_lblNameValue">{name}</span>
      <table id="ContentPlaceHolder1_gvSubjects">
        <tr><th>Sr</th><th>Subject</th><th>Theory</th><th>Practical</th><th>Total</th></tr>
        {body_rows}
      </table>
    </body></html>
    """


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """
    Stands in for requests.Session. `result` is either the submission HTML or
    a callable taking the posted form data and returning it.
    """

    def __init__(self, entry=None, result="", get_error=None, post_error=None,
                 get_status=200, post_status=200, delays=None):
        self.entry = entry_page() if entry is None else entry
        self.result = result
        self.get_error = get_error
        self.post_error = post_error
        self.get_status = get_status
        self.post_status = post_status
        self.delays = delays or {}
        self.calls = []
        self.completed = []
        self.sessions_opened = 0
        self._lock = threading.Lock()

    def __call__(self):
        with self._lock:
            self.sessions_opened += 1
        return self

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def get(self, url, headers=None, timeout=None):
        self.calls.append(("GET", url, None, headers, timeout))
        if self.get_error:
            raise self.get_error
        return FakeResponse(self.entry, self.get_status)

    def post(self, url, data=None, headers=None, timeout=None):
        self.calls.append(("POST", url, data, headers, timeout))
        if self.post_error:
            raise self.post_error
        roll = data.get("ctl00$ContentPlaceHolder1$txtRollNo")
        time.sleep(self.delays.get(roll, 0))
        with self._lock:
            self.completed.append(roll)
        html = self.result(data) if callable(self.result) else self.result
        return FakeResponse(html, self.post_status)

    def methods(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def make_resolver():
    def _make(session):
        return PortalResolver(portal_url=PORTAL_URL, exam_id="72", subject="PHYSICS",
                              timeout=5, session_factory=session)
    return _make
