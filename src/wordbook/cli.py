"""Command-line interface for wordbook."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from schemas import EXAMPLE_DELIMITER, ArticleRecord, VocabularySummary
from wordbook.config import DEFAULT_HOME_DIR, HOME_ENV_VAR, build_registry_config
from wordbook.model import Article, Vocabulary
from wordbook.registry import VocabularyRegistry


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def open_registry(args: argparse.Namespace) -> VocabularyRegistry:
    """Build and scan the registry for the configured home directory."""
    registry = VocabularyRegistry(build_registry_config(args.home))
    registry.scan()
    return registry


def select_vocabulary(
    registry: VocabularyRegistry, name: str, logger: logging.Logger
) -> Vocabulary | None:
    if registry.get(name) is None:
        logger.error(f"Vocabulary not found: {name}")
        return None
    return registry.select(name)


def log_article(article: Article, logger: logging.Logger) -> None:
    logger.info(f"Source: {article.source}")
    logger.info(f"  Translates: {'; '.join(article.translates)}")
    if article.examples:
        logger.info("  Examples:")
        for example in article.examples:
            logger.info(f"    - {example}")


def list_vocabularies(args: argparse.Namespace) -> int:
    """Execute the list command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        registry = open_registry(args)
    except Exception as e:
        logger.error(f"Failed to list vocabularies: {e}")
        return 1

    if not registry.vocabularies:
        logger.info(f"No vocabularies in {registry.home_dir}")
        return 0

    for vocabulary in registry.vocabularies:
        summary = VocabularySummary.of(vocabulary)
        logger.info(f"{summary.name}: {summary.article_count} articles ({summary.path})")
    return 0


def create_vocabulary(args: argparse.Namespace) -> int:
    """Execute the create command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        registry = open_registry(args)
        vocabulary = registry.create(args.name)
    except Exception as e:
        logger.error(f"Failed to create vocabulary: {e}")
        return 1

    logger.info(f"Created vocabulary: {vocabulary.name}")
    logger.info(f"  Output: {vocabulary.path}")
    return 0


def rename_vocabulary(args: argparse.Namespace) -> int:
    """Execute the rename command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        registry = open_registry(args)
        vocabulary = registry.rename(args.name, args.new_name)
    except Exception as e:
        logger.error(f"Failed to rename vocabulary: {e}")
        return 1

    logger.info(f"Renamed vocabulary {args.name} to {vocabulary.name}")
    logger.info(f"  Output: {vocabulary.path}")
    return 0


def list_articles(args: argparse.Namespace) -> int:
    """Execute the articles command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        registry = open_registry(args)
    except Exception as e:
        logger.error(f"Failed to list articles: {e}")
        return 1

    vocabulary = select_vocabulary(registry, args.vocabulary, logger)
    if vocabulary is None:
        return 1

    articles = registry.current_articles()
    logger.info(f"Vocabulary {vocabulary.name}: {len(articles)} articles")
    for article in articles:
        logger.info(f"  {article.source}: {'; '.join(article.translates)}")
    return 0


def show_article(args: argparse.Namespace) -> int:
    """Execute the show command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        registry = open_registry(args)
    except Exception as e:
        logger.error(f"Failed to show article: {e}")
        return 1

    vocabulary = select_vocabulary(registry, args.vocabulary, logger)
    if vocabulary is None:
        return 1

    article = vocabulary.get_article(args.source)
    if article is None:
        logger.error(f"Article not found: {args.source}")
        return 1

    log_article(article, logger)
    return 0


def add_article(args: argparse.Namespace) -> int:
    """Execute the add command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        record = ArticleRecord.from_text(
            args.source,
            args.translates,
            EXAMPLE_DELIMITER.join(args.example or []),
        )
    except ValidationError as e:
        logger.error(f"Invalid article: {e}")
        return 1

    try:
        registry = open_registry(args)
        if select_vocabulary(registry, args.vocabulary, logger) is None:
            return 1
        outcome = registry.add_article(record.source, record.translates, record.examples)
    except Exception as e:
        logger.error(f"Failed to add article: {e}")
        return 1

    if not outcome.ok:
        logger.error(f"Failed to add article: {outcome.error.message}")
        return 1

    logger.info(f"Added article to {args.vocabulary}")
    log_article(outcome.article, logger)
    return 0


def edit_article(args: argparse.Namespace) -> int:
    """Execute the edit command.

    Fields that are not given keep their current values.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        registry = open_registry(args)
    except Exception as e:
        logger.error(f"Failed to edit article: {e}")
        return 1

    vocabulary = select_vocabulary(registry, args.vocabulary, logger)
    if vocabulary is None:
        return 1

    existing = vocabulary.get_article(args.source)
    if existing is None:
        logger.error(f"Article not found: {args.source}")
        return 1

    try:
        parsed = ArticleRecord.from_text(
            args.new_source or existing.source,
            args.translates,
            EXAMPLE_DELIMITER.join(args.example or []),
        )
    except ValidationError as e:
        logger.error(f"Invalid article: {e}")
        return 1

    translates = parsed.translates if args.translates is not None else existing.translates
    examples = parsed.examples if args.example is not None else existing.examples

    try:
        outcome = registry.change_article(existing.source, parsed.source, translates, examples)
    except Exception as e:
        logger.error(f"Failed to edit article: {e}")
        return 1

    if not outcome.ok:
        logger.error(f"Failed to edit article: {outcome.error.message}")
        return 1

    logger.info(f"Changed article in {args.vocabulary}")
    log_article(outcome.article, logger)
    return 0


def remove_article(args: argparse.Namespace) -> int:
    """Execute the remove command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        registry = open_registry(args)
        if select_vocabulary(registry, args.vocabulary, logger) is None:
            return 1
        outcome = registry.remove_article(args.source)
    except Exception as e:
        logger.error(f"Failed to remove article: {e}")
        return 1

    if not outcome.ok:
        logger.error(f"Failed to remove article: {outcome.error.message}")
        return 1

    logger.info(f"Removed article {outcome.article.source} from {args.vocabulary}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="wordbook",
        description="Manage personal vocabularies stored as XML files",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--home",
        type=Path,
        default=None,
        help=f"Vocabulary directory (default: ${HOME_ENV_VAR} or {DEFAULT_HOME_DIR})",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    list_parser = subparsers.add_parser(
        "list",
        help="List known vocabularies",
        description="List the vocabularies found in the vocabulary directory.",
    )
    list_parser.set_defaults(func=list_vocabularies)

    create_parser = subparsers.add_parser(
        "create",
        help="Create an empty vocabulary",
        description="Create a new empty vocabulary file in the vocabulary directory.",
    )
    create_parser.add_argument("name", help="Name of the new vocabulary")
    create_parser.set_defaults(func=create_vocabulary)

    rename_parser = subparsers.add_parser(
        "rename",
        help="Rename a vocabulary",
        description="Rename a vocabulary and move its file to the new name.",
    )
    rename_parser.add_argument("name", help="Current vocabulary name")
    rename_parser.add_argument("new_name", help="New vocabulary name")
    rename_parser.set_defaults(func=rename_vocabulary)

    articles_parser = subparsers.add_parser(
        "articles",
        help="List the articles of a vocabulary",
        description="List every article of a vocabulary with its translations.",
    )
    articles_parser.add_argument(
        "--vocabulary",
        required=True,
        help="Vocabulary name",
    )
    articles_parser.set_defaults(func=list_articles)

    show_parser = subparsers.add_parser(
        "show",
        help="Show one article",
        description="Show the translations and examples of one article.",
    )
    show_parser.add_argument(
        "--vocabulary",
        required=True,
        help="Vocabulary name",
    )
    show_parser.add_argument(
        "--source",
        required=True,
        help="Source word of the article",
    )
    show_parser.set_defaults(func=show_article)

    add_parser = subparsers.add_parser(
        "add",
        help="Add an article to a vocabulary",
        description="Add a new article. Fails if the source word already exists.",
    )
    add_parser.add_argument(
        "--vocabulary",
        required=True,
        help="Vocabulary name",
    )
    add_parser.add_argument(
        "--source",
        required=True,
        help="Source word",
    )
    add_parser.add_argument(
        "--translates",
        default="",
        help="Translations separated by ';'",
    )
    add_parser.add_argument(
        "--example",
        action="append",
        default=None,
        help="Usage example (repeat for several)",
    )
    add_parser.set_defaults(func=add_article)

    edit_parser = subparsers.add_parser(
        "edit",
        help="Change an article",
        description="Replace the source, translations or examples of an article.",
    )
    edit_parser.add_argument(
        "--vocabulary",
        required=True,
        help="Vocabulary name",
    )
    edit_parser.add_argument(
        "--source",
        required=True,
        help="Source word of the article to change",
    )
    edit_parser.add_argument(
        "--new-source",
        default=None,
        help="New source word",
    )
    edit_parser.add_argument(
        "--translates",
        default=None,
        help="New translations separated by ';'",
    )
    edit_parser.add_argument(
        "--example",
        action="append",
        default=None,
        help="New usage example (repeat for several; replaces all examples)",
    )
    edit_parser.set_defaults(func=edit_article)

    remove_parser = subparsers.add_parser(
        "remove",
        help="Remove an article",
        description="Remove an article from a vocabulary.",
    )
    remove_parser.add_argument(
        "--vocabulary",
        required=True,
        help="Vocabulary name",
    )
    remove_parser.add_argument(
        "--source",
        required=True,
        help="Source word of the article to remove",
    )
    remove_parser.set_defaults(func=remove_article)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
