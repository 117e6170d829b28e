"""CLI for clustering articles."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from cluster_articles.cluster_articles import build_cluster_records, cluster_articles, get_key_fn
from cluster_articles.helpers import load_articles, parse_cluster_articles_args
from common.cli_helpers import setup_logging
from common.config import load_config
from common.local_io import save_jsonl_records_local

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_cluster_articles_args(argv)

    load_dotenv()
    config = load_config(args.config)

    articles = load_articles(args.inputs)
    if not articles:
        logger.warning("No articles to cluster")
        return

    policy = args.key_policy or config.key_policy
    logger.info("Clustering %d articles (key_policy=%s)", len(articles), policy)
    clusters = cluster_articles(articles, key_fn=get_key_fn(policy, config.tracking))
    records = build_cluster_records(clusters)

    for record in records[:10]:
        if record.size > 1:
            logger.info("%d x %s (%s)", record.size, record.title, ", ".join(record.sources))

    if args.load_local:
        save_jsonl_records_local(records, "clustered_articles", output_dir=args.output_dir)


if __name__ == "__main__":
    main()
