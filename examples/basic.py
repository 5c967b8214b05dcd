"""basic.py"""
import sys

from clip import ClipError, Registry, ValueType, create_arg

parser = Registry("cc")
create_arg("--output").alias("-o").add_param("output", 1, ValueType.FILE).help(
    "output file"
).add(parser)
create_arg("--file").alias("-f").add_param("file", 1, ValueType.FILE).help(
    "input file"
).add(parser)

if __name__ == "__main__":
    try:
        inputs = parser.parse_env()
    except ClipError as error:
        print(error, file=sys.stderr)
        sys.exit(1)
    for item in inputs:
        print(item.name, item.values)
