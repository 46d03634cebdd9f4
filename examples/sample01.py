"""Print every option value.

    python examples/sample01.py --number 4 --array a b --json key:value --boolean
    python examples/sample01.py --help
"""
from rich.pretty import pprint

from clopts import parse_or_exit
from clopts.package import distribution_version

clopts = parse_or_exit(
    {
        "string": {"value": "text", "description": "This is string type sample."},
        "number": {"value": 0, "description": "This is number type sample."},
        "boolean": "This is boolean type sample.",
        "array": {"value": ["string"], "description": "This is array type sample."},
        "json": {"value": {"string": "string"}, "description": "This is json type sample."},
    },
    version=lambda: distribution_version("clopts"),
)

pprint(clopts.get_all())
