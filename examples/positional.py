"""positional.py"""
from clip import Registry, ValueType, create_arg

parser = Registry("open")
create_arg("input").positional(ValueType.FILE).help("input").add(parser)
create_arg("mode").positional(ValueType.set("read", "write", "append")).help(
    "file modes"
).add(parser)
create_arg("output").positional(ValueType.FILE).help("output").add(parser)
create_arg("--level").add_param("level", 1, ValueType.range(0, 9)).add(parser)

if __name__ == "__main__":
    input_, mode, output = parser.parse("data.txt read out.txt")
    print(input_.value, mode.value, output.value)
    print(parser.parse("data.txt --level 3 append out.txt"))
