import csv
import sys
from json import dumps as to_json_string

import click
from typing import Any, Iterable
from yaml import dump as to_yaml_string, SafeDumper

from voicerest.cli.helpers.exporter import normalize


class OutputFormat:
    JSON = 'json'
    YAML = 'yaml'
    CSV = 'csv'

    DEFAULT = JSON
    ALL = (JSON, YAML, CSV)


def show_iterator(output_format: str, iterator: Iterable[Any], sort_keys: bool = True) -> int:
    """ Display the items from the iterator and return the number of displayed items """
    if output_format == OutputFormat.JSON:
        printer = JsonIteratorPrinter()
    elif output_format == OutputFormat.YAML:
        printer = YamlIteratorPrinter()
    elif output_format == OutputFormat.CSV:
        printer = CsvIteratorPrinter()
    else:
        raise ValueError(f'The given output format ({output_format}) is not available.')

    return printer.print(iterator, sort_keys=sort_keys)


class BaseIteratorPrinter:
    def print(self, iterator: Iterable[Any], sort_keys: bool = True) -> int:
        raise NotImplementedError()


class JsonIteratorPrinter(BaseIteratorPrinter):
    def print(self, iterator: Iterable[Any], sort_keys: bool = True) -> int:
        row_count = 0

        for row in iterator:
            if row_count == 0:
                click.echo('[')
            else:
                click.echo(',')

            encoded = to_json_string(normalize(row, sort_keys=sort_keys), indent=2, sort_keys=False)
            click.echo('\n'.join([f'  {line}' for line in encoded.split('\n')]), nl=False)

            row_count += 1

        if row_count == 0:
            click.echo('[]')
        else:
            click.echo('\n]')

        return row_count


class YamlIteratorPrinter(BaseIteratorPrinter):
    def print(self, iterator: Iterable[Any], sort_keys: bool = True) -> int:
        row_count = 0

        for row in iterator:
            normalized = normalize(row, sort_keys=sort_keys)
            encoded = (
                normalized
                if isinstance(normalized, str)
                else to_yaml_string(normalized, Dumper=SafeDumper, sort_keys=False)
            )

            click.echo('- ', nl=False)
            click.echo('\n'.join([f'  {line}' for line in encoded.split('\n')]).strip())

            row_count += 1

        if row_count == 0:
            click.echo('[]')

        return row_count


class CsvIteratorPrinter(BaseIteratorPrinter):
    def print(self, iterator: Iterable[Any], sort_keys: bool = True) -> int:
        row_count = 0

        writer = csv.writer(sys.stdout)
        headers = []

        for row in iterator:
            normalized = normalize(row, sort_keys=sort_keys)

            if row_count == 0:
                headers.extend(normalized.keys())
                writer.writerow(headers)

            writer.writerow([normalized.get(h) for h in headers])

            row_count += 1

        return row_count
