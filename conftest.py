import pytest
from lxml import html

from css_selector_builder import SelectorExpression

@pytest.fixture
def expression():
    """Return a fresh SelectorExpression."""
    return SelectorExpression()

@pytest.fixture
def document():
    """Return a small parsed HTML document for matching built selectors."""
    return html.fromstring(
        '<html><body>'
        '<div id="main" class="container editable">'
        '<a class="thumb" href="/img/cat.png">Cat</a>'
        '<a class="thumb" href="/docs/readme.txt">Readme</a>'
        '<ul class="menu"><li>One</li><li class="active">Two</li></ul>'
        '</div>'
        '<table id="data"><tr><td class="cell">1</td><td class="cell">2</td></tr></table>'
        '<input type="text" name="q">'
        '</body></html>'
    )
