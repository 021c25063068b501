"""Shared test fixtures."""

import pytest
from bs4 import BeautifulSoup

from career_scraper.models import Team


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, 'html.parser')


INFOBOX_HTML = """
<div class="mw-parser-output">
<table class="infobox vcard">
  <tr><th colspan="3">Personal information</th></tr>
  <tr><th>Date of birth</th><td>5 February 1985</td></tr>
  <tr><th>Position(s)</th><td>Forward</td></tr>
  <tr><th colspan="3">Youth career</th></tr>
  <tr><td>1997–2002</td><td><a href="/wiki/Sporting_CP">Sporting CP</a></td></tr>
  <tr><th colspan="3">Senior career*</th></tr>
  <tr><th>Years</th><th>Team</th><th>Apps (Gls)</th></tr>
  <tr><td>2002–2003</td><td><a href="/wiki/Sporting_CP_B">Sporting CP B</a></td><td>2 (0)</td></tr>
  <tr><td>2003–2009</td><td><a href="/wiki/Manchester_United_F.C.">Manchester United</a></td><td>196 (84)</td></tr>
  <tr><td>2009–2018</td><td><a href="/wiki/Real_Madrid_CF">Real Madrid</a></td><td>292 (311)</td></tr>
  <tr><td>2023–</td><td><a href="/wiki/Al_Nassr_FC">Al Nassr</a></td><td>50 (44)</td></tr>
  <tr><td></td><td>Total</td><td>540 (439)</td></tr>
  <tr><th colspan="3">International career</th></tr>
  <tr><td>2003–</td><td><a href="/wiki/Portugal_national_football_team">Portugal</a></td><td>200 (120)</td></tr>
</table>
</div>
"""

WIKITABLE_HTML = """
<div class="mw-parser-output">
<h2>Club career</h2>
<table class="wikitable">
  <thead>
    <tr><th>Season</th><th>Club</th><th>Apps</th><th>Goals</th></tr>
  </thead>
  <tbody>
    <tr><td>2016–17</td><td><a href="/wiki/Molde_FK">Molde</a></td><td>14</td><td>4</td></tr>
    <tr><td>2019</td><td><a href="/wiki/Red_Bull_Salzburg">Red Bull Salzburg</a></td><td>27</td><td>29</td></tr>
    <tr><td>2020–2022</td><td><a href="/wiki/Borussia_Dortmund">Borussia Dortmund</a></td><td>67</td><td>62</td></tr>
    <tr><td></td><td>Total</td><td>108</td><td>95</td></tr>
  </tbody>
</table>
</div>
"""

TRANSFERBOX_HTML = """
<div class="mw-parser-output">
<h2>Transfers</h2>
<table>
  <tr><th>Date</th><th>From</th><th>To</th><th>Fee</th></tr>
  <tr><td>1 July 2013</td><td><a href="/wiki/Santos_FC">Santos</a></td><td><a href="/wiki/FC_Barcelona">Barcelona</a></td><td>€88.2m</td></tr>
  <tr><td>3 August 2017</td><td><a href="/wiki/FC_Barcelona">Barcelona</a></td><td><a href="/wiki/Paris_Saint-Germain_F.C.">Paris Saint-Germain</a></td><td>€222 million</td></tr>
  <tr><td>January 2020</td><td><a href="/wiki/Paris_Saint-Germain_F.C.">Paris Saint-Germain</a></td><td><a href="/wiki/Santos_FC">Santos</a></td><td>Loan</td></tr>
  <tr><td>2021</td><td><a href="/wiki/A">Somewhere</a></td><td><a href="/wiki/Total">Total</a></td><td>Free</td></tr>
</table>
</div>
"""

TEXT_HTML = """
<div class="mw-parser-output">
<p>Erling Braut Haaland is a Norwegian professional footballer.</p>
<div class="mw-heading mw-heading2"><h2>Club career</h2></div>
<p>Haaland joined Molde in 2017 after leaving Bryne.</p>
<p>He later signed for Borussia Dortmund in January 2020. He played for Red Bull Salzburg (2019–2020).</p>
<div class="mw-heading mw-heading2"><h2>Personal life</h2></div>
<p>He moved to Manchester City in 2022.</p>
</div>
"""


@pytest.fixture
def infobox_soup() -> BeautifulSoup:
    return make_soup(INFOBOX_HTML)


@pytest.fixture
def wikitable_soup() -> BeautifulSoup:
    return make_soup(WIKITABLE_HTML)


@pytest.fixture
def transferbox_soup() -> BeautifulSoup:
    return make_soup(TRANSFERBOX_HTML)


@pytest.fixture
def text_soup() -> BeautifulSoup:
    return make_soup(TEXT_HTML)


@pytest.fixture
def teams() -> list:
    """A small team registry."""
    return [
        Team(id="1", name="Manchester United F.C."),
        Team(id="2", name="Manchester City F.C."),
        Team(id="3", name="Real Madrid"),
        Team(id="4", name="Sporting CP"),
        Team(id="5", name="Borussia Dortmund"),
        Team(id="6", name="Bayern Munich"),
    ]
