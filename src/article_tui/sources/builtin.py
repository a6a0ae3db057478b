from __future__ import annotations

from typing import Tuple

from ..datamodels import Article
from .base import ArticleSource

SAMPLE_ARTICLES: Tuple[Article, ...] = (
    Article(
        id=1,
        title="The Future of Artificial Intelligence",
        content=(
            "Artificial intelligence is transforming industries across the globe. "
            "From healthcare to finance, AI is making processes more efficient and "
            "creating new opportunities for innovation."
        ),
    ),
    Article(
        id=2,
        title="Sustainable Energy Solutions",
        content=(
            "Renewable energy sources like solar and wind power are becoming "
            "increasingly important as we work towards a more sustainable future. "
            "These technologies help reduce our carbon footprint."
        ),
    ),
    Article(
        id=3,
        title="Web Development Trends 2024",
        content=(
            "Modern web development continues to evolve with new frameworks and "
            "tools. React, Vue, and Angular remain popular choices for building "
            "dynamic user interfaces."
        ),
    ),
    Article(
        id=4,
        title="Machine Learning in Healthcare",
        content=(
            "Machine learning algorithms are being used to analyze medical data and "
            "assist in diagnosis. This technology has the potential to revolutionize "
            "patient care and treatment outcomes."
        ),
    ),
    Article(
        id=5,
        title="Cybersecurity Best Practices",
        content=(
            "Protecting digital assets requires robust cybersecurity measures. "
            "Regular updates, strong passwords, and employee training are essential "
            "components of a good security strategy."
        ),
    ),
)


class BuiltinSource(ArticleSource):
    name = "builtin"

    def get_articles(self) -> Tuple[Article, ...]:
        return SAMPLE_ARTICLES
