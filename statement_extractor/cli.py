# statement_extractor/cli.py
import logging
import os
import click
from dotenv import load_dotenv
from statement_extractor.categories import load_category_rules
from statement_extractor.config import load_config
from statement_extractor.errors import StatementError
from statement_extractor.outputs import get_output
from statement_extractor.pipeline import files_to_transactions, list_statement_files
from statement_extractor.utils import dedupe_transactions

LOG_LEVEL_ENV = "STATEMENT_EXTRACT_LOG_LEVEL"


def log_level_from_env():
    """Level name from the environment, INFO when unset or not a logging level."""
    level = os.getenv(LOG_LEVEL_ENV, "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        click.echo(f"Ignoring unknown {LOG_LEVEL_ENV}={level!r}; using INFO", err=True)
        return "INFO"
    return level


@click.command()
@click.option(
    '--in-file', 'in_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Single statement file (.pdf or .txt) to convert.'
)
@click.option(
    '--in-directory', 'in_directory',
    default=None,
    type=click.Path(exists=True, file_okay=False),
    help='Directory of statement files; every file in it is converted.'
)
@click.option(
    '--out-file', 'out_file',
    required=True,
    type=click.Path(dir_okay=False),
    help='Where to write the merged transactions.'
)
@click.option(
    '--category-file', 'category_file',
    default=None,
    type=click.Path(dir_okay=False),
    help='JSON or YAML category rules (default: category.json; may be absent).'
)
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional config.yaml'
)
@click.option(
    '--output', 'output_format',
    default='csv',
    type=click.Choice(['csv', 'excel']),
    help='Output format: csv or excel'
)
@click.option(
    '--jobs',
    default=None,
    type=click.IntRange(min=1),
    help='Number of statements parsed concurrently.'
)
@click.option(
    '--dedupe',
    is_flag=True,
    default=False,
    help='Drop identical transactions appearing in more than one statement.'
)
@click.option(
    '--env-file', 'env_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional .env file, e.g. to set STATEMENT_EXTRACT_LOG_LEVEL'
)
def main(in_file, in_directory, out_file, category_file, config_path,
         output_format, jobs, dedupe, env_file):
    """
    Extract transactions from Scotiabank, CIBC and PC Financial credit card
    statements, check them against the statement totals, categorize them and
    write a single date-ordered file.
    """
    if env_file:
        load_dotenv(env_file)
    logging.basicConfig(level=log_level_from_env())

    if bool(in_file) == bool(in_directory):
        raise click.UsageError('Exactly one of --in-file or --in-directory must be given')

    cfg = load_config(config_path)
    rules = load_category_rules(category_file or cfg.get('category_file'))
    paths = [in_file] if in_file else list_statement_files(in_directory)

    try:
        txs = files_to_transactions(paths, rules, cfg, jobs=jobs or cfg.get('jobs', 4))
    except StatementError as e:
        source = in_file or in_directory
        raise click.ClickException(f"Failed converting {source} to records:  {e}")

    if dedupe:
        txs = dedupe_transactions(txs)

    outputter = get_output(output_format, cfg)
    outputter.write(txs, out_file)
    click.echo(f"Successfully wrote output to {out_file}")
