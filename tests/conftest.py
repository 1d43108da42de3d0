"""Shared fixtures: saved pages shaped like the paste site's markup."""

import pytest
from lxml.html import HtmlElement

from pasteparse.context import ExtractionContext
from pasteparse.document import parse_document

# Rendered by the site as "Thursday 2nd of May 2024 10:05:29 AM CDT"
PASTE_TIMESTAMP = 1714662329

PASTE_HTML = """
<html>
<head>
    <meta property="og:url" content="https://pastebin.com/abc123">
    <meta name="csrf-token" content="tok-123">
</head>
<body>
<div class="post-view">
    <div class="details">
        <div class="user-icon"><img src="/cache/img/1/2/alice.jpg"></div>
        <div class="info-bar">
            <div class="info-top"><h1>Hello world</h1></div>
            <div class="info-bottom">
                <div class="username"><a href="/u/alice">alice</a></div>
                <div class="pro">PRO</div>
                <div class="date"><span title="Thursday 2nd of May 2024 10:05:29 AM CDT">May 2nd, 2024</span><span title="Last edit on: Thursday 2nd of May 2024 10:05:29 AM CDT">(edited)</span></div>
                <div class="visits">1,234</div>
                <div class="rating">4.5</div>
                <div class="expire">Never</div>
                <div title="Comments"><a href="#comments">2</a></div>
            </div>
        </div>
    </div>
    <div class="tags"><a href="/tags/python">python</a><a href="/tags/demo">demo</a></div>
    <div class="highlighted-code">
        <div class="top-buttons">
            <div class="left">
                <a href="/archive/python" class="btn -small h_800">Python</a>
                1.50 KB
                <span title="Category"><span class="source-icon">|</span> Software</span>
                <a class="btn -small -like" href="#">5</a>
                <a class="btn -small -dislike" href="#">1</a>
            </div>
            <div class="right"><a href="/report/abc123" class="btn -small">report</a></div>
        </div>
        <div class="source"><ol><li>print("hello")</li></ol></div>
    </div>
    <div class="comments">
        <div class="comments__list">
            <ul>
                <li>
                    <div class="details">
                        <div class="user-icon"><img src="/themes/pastebin/img/guest.png"></div>
                        <div class="username">Guest</div>
                        <div class="date"><span title="Thursday 2nd of May 2024 10:05:29 AM CDT">May 2nd, 2024</span></div>
                    </div>
                    <div class="highlighted-code">
                        <div class="top-buttons">
                            <div class="left">
                                <a href="/archive/text" class="btn -small h_800">None</a>
                                12 bytes
                            </div>
                            <div class="right"><a href="/report/cm1" class="btn -small">report</a></div>
                        </div>
                        <div class="source"><ol><li>first reply</li></ol></div>
                    </div>
                    <a href="#comments">3</a>
                </li>
                <li>
                    <div class="details">
                        <div class="user-icon"><img src="/cache/img/9/bob.jpg"></div>
                        <div class="username"><a href="/u/bob">bob</a></div>
                        <div class="date"><span title="not a date">yesterday</span></div>
                    </div>
                    <div class="highlighted-code">
                        <div class="top-buttons">
                            <div class="left">2.5 KiB</div>
                            <div class="right"><a href="/report/cm2" class="btn -small">report</a></div>
                        </div>
                        <div class="source"><ol><li>second reply</li></ol></div>
                    </div>
                </li>
            </ul>
        </div>
    </div>
</div>
</body>
</html>
"""

COMMENT_PASTE_HTML = """
<html>
<head>
    <meta property="og:url" content="https://pastebin.com/cm1">
</head>
<body>
<div class="post-view">
    <div class="notice">Some other notice</div>
    <div class="notice"><b>This is comment for paste</b> <a href="/abc123#cm1">Hello world</a></div>
    <div class="details">
        <div class="username">Guest</div>
        <div class="unlisted" title="Unlisted paste"></div>
    </div>
    <div class="highlighted-code">
        <div class="source"><ol><li>first reply</li></ol></div>
    </div>
</div>
</body>
</html>
"""

LOCKED_PASTE_HTML = """
<html>
<head>
    <meta property="og:url" content="https://pastebin.com/secret1">
    <meta name="csrf-token" content="tok-456">
</head>
<body>
<div class="burn">This paste will be deleted after it is read.</div>
<form id="postpasswordverificationform" action="/secret1" method="post">
    <input id="postpasswordverificationform-password" type="password" name="PostPasswordVerificationForm[password]">
</form>
</body>
</html>
"""

USER_HTML = """
<html>
<head>
    <meta property="og:url" content="https://pastebin.com/u/alice">
</head>
<body>
<div class="user-view">
    <div class="user-icon"><img src="/cache/img/1/2/alice.jpg"></div>
    <div class="info">
        <h1>alice</h1>
        <div class="pro">PRO</div>
        <a class="web" href="https://alice.example">alice.example</a>
        <span class="location"> Springfield </span>
        <span class="views">2,000</span>
        <span class="views -all">15,500</span>
        <span class="rating">4.2</span>
        <span class="date-text" title="Thursday 2nd of May 2024 10:05:29 AM CDT">May 2nd, 2024</span>
    </div>
</div>
<table class="maintable">
    <tbody>
        <tr><th>Name / Title</th><th>Added</th><th>Expires</th><th>Hits</th><th>Comments</th><th>Syntax</th></tr>
        <tr>
            <td><a href="/abc123">Hello world</a></td>
            <td>1 day ago</td>
            <td>Never</td>
            <td>1,234</td>
            <td>2</td>
            <td><a href="/archive/python">Python</a></td>
        </tr>
        <tr>
            <td><a href="/def456">Notes</a></td>
            <td>3 days ago</td>
            <td>1 Week</td>
            <td>17</td>
            <td>0</td>
            <td><a href="/archive/text">None</a></td>
        </tr>
    </tbody>
</table>
</body>
</html>
"""

ARCHIVE_HTML = """
<html>
<head>
    <meta property="og:url" content="https://pastebin.com/archive/python">
</head>
<body>
<div class="archive-table">
    <table class="maintable">
        <tr><th>Name / Title</th><th>Posted</th><th>Syntax</th></tr>
        <tr>
            <td><a href="/abc123">Hello world</a></td>
            <td>10 sec ago</td>
            <td><a href="/archive/python">Python</a></td>
        </tr>
        <tr>
            <td><a href="/zzz999">Untitled</a></td>
            <td>1 min ago</td>
            <td><a href="/archive/python">Python</a></td>
        </tr>
        <tr>
            <td><a href="/qqq111">script</a></td>
            <td>2 min ago</td>
            <td><a href="/archive/python">Python</a></td>
        </tr>
    </table>
</div>
</body>
</html>
"""


@pytest.fixture
def context() -> ExtractionContext:
    """A context for the default site origin."""
    return ExtractionContext.create()


@pytest.fixture
def paste_page() -> HtmlElement:
    """A paste with tags, an edit date and two comments."""
    return parse_document(PASTE_HTML)


@pytest.fixture
def comment_paste_page() -> HtmlElement:
    """An unlisted paste that is itself a comment on abc123."""
    return parse_document(COMMENT_PASTE_HTML)


@pytest.fixture
def locked_paste_page() -> HtmlElement:
    """A password-protected, burn-after-read paste."""
    return parse_document(LOCKED_PASTE_HTML)


@pytest.fixture
def user_page() -> HtmlElement:
    """A profile page with two pastes in its table."""
    return parse_document(USER_HTML)


@pytest.fixture
def archive_page() -> HtmlElement:
    """The python archive listing with three rows."""
    return parse_document(ARCHIVE_HTML)


@pytest.fixture
def paste_file(tmp_path):
    """The paste page saved to disk."""
    path = tmp_path / "abc123.html"
    path.write_text(PASTE_HTML, encoding="utf-8")
    return path


@pytest.fixture
def locked_paste_file(tmp_path):
    """The locked paste page saved to disk."""
    path = tmp_path / "secret1.html"
    path.write_text(LOCKED_PASTE_HTML, encoding="utf-8")
    return path
