"""Career parser that tries each strategy in precedence order."""

from typing import List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup
import structlog

from career_scraper.extractors.strategies import STRATEGIES, CareerStrategy, StrategyName
from career_scraper.models import CareerFact

logger = structlog.get_logger()


class CareerParser:
    """
    Extract career facts from a Wikipedia article.

    Strategies are tried in order. The first one that both claims the
    document and yields at least one fact wins; when none does, the result
    is an empty list.
    """

    def __init__(self, strategies: Sequence[CareerStrategy] = STRATEGIES):
        self.strategies: Tuple[CareerStrategy, ...] = tuple(strategies)

    def parse_document(self, soup: BeautifulSoup) -> Tuple[Optional[StrategyName], List[CareerFact]]:
        """
        Parse a document and report which strategy produced the facts.

        Returns:
            (strategy name, facts), or (None, []) when nothing matched
        """
        for strategy in self.strategies:
            if not strategy.can_parse(soup):
                continue

            facts = strategy.parse(soup)
            if facts:
                logger.info("career_strategy_selected", strategy=strategy.name.value, facts=len(facts))
                return strategy.name, facts

            logger.debug("career_strategy_empty", strategy=strategy.name.value)

        return None, []

    def parse(self, soup: BeautifulSoup) -> List[CareerFact]:
        _, facts = self.parse_document(soup)
        return facts

    def parse_html(self, html: str) -> List[CareerFact]:
        return self.parse(BeautifulSoup(html, 'html.parser'))
