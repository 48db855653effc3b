from tenet.parse.yaml import YamlParser


def test_parse_str():
    yaml = """
    program:
        operations:
            - T3 = transpose(T2, [1, 0])
    codegen:
        shapes:
            0: [2, m]
    """
    data = {"program": {"operations": ["T3 = transpose(T2, [1, 0])"]},
            "codegen": {"shapes": {0: [2, "m"]}}}
    assert YamlParser.parse_str(yaml) == data


def test_parse_file():
    data = YamlParser.parse_file("tests/integration/matmul.yaml")
    assert data == {"program": {"operations": [
        "T2 = einsum(T0[7, 8], T1[8, 9] -> [7, 9])"]}}
