"""variadic.py"""
from clip import UNBOUNDED, Registry, ValueType, create_arg

parser = Registry("ld")
create_arg("inputs").variadic(ValueType.FILE).help("input files").add(parser)
create_arg("--output").alias("-o").add_param("output", 1, ValueType.FILE).help(
    "output file"
).add(parser)
create_arg("--lib").alias("-l").add_param("libs", UNBOUNDED).help(
    "libraries to link"
).add(parser)

if __name__ == "__main__":
    for item in parser.parse("main.o util.o -l m pthread --output a.out extra.o"):
        print(item.name, item.values)
