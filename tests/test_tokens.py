from clopts.tokens import TokenizedInput, tokenize


def test_tokenize_entries_and_flags():
    tokens = tokenize(["in.txt", "out.txt", "--port", "80", "-v"])
    assert tokens == TokenizedInput(
        entries=["in.txt", "out.txt"], options={"--port": ["80"], "-v": []}
    )


def test_tokenize_repeated_flag_collects_values():
    tokens = tokenize(["--tags", "a", "--port", "1", "--tags", "b", "c"])
    assert tokens.options == {"--tags": ["a", "b", "c"], "--port": ["1"]}
    assert tokens.entries == []


def test_tokenize_bare_tokens_after_flag_are_not_entries():
    tokens = tokenize(["--name", "x", "y"])
    assert tokens.entries == []
    assert tokens.options == {"--name": ["x", "y"]}


def test_tokenize_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog", "file", "--flag"])
    tokens = tokenize()
    assert tokens.entries == ["file"]
    assert tokens.options == {"--flag": []}


def test_tokenize_empty():
    assert tokenize([]) == TokenizedInput()
