# tests/test_support.py
import reposcope.utils.tokenizer as tokenizer
from reposcope.config import DEFAULT_MODEL, DEFAULT_TEMPERATURE, load_settings
from reposcope.core.tree import render_tree

# --- tree ---

def test_render_tree_keeps_inclusion_order():
    tree = render_tree(["src/main.py", "src/utils/helper.py", "README.md"], "my_project")
    assert tree == (
        "my_project/\n"
        "├── src\n"
        "│   ├── main.py\n"
        "│   └── utils\n"
        "│       └── helper.py\n"
        "└── README.md\n"
    )


def test_render_tree_empty():
    assert render_tree([], "proj") == "proj/\n"


# --- tokenizer ---

def test_estimate_tokens_counts_something():
    assert tokenizer.estimate_tokens("") == 0
    assert tokenizer.estimate_tokens("def hello():\n    return 'world'\n" * 20) > 0


def test_estimate_tokens_falls_back_when_encoding_unavailable(monkeypatch):
    def unavailable(name):
        raise OSError("offline")

    monkeypatch.setattr(tokenizer, "_encoding", unavailable)
    assert tokenizer.estimate_tokens("x" * 40) == 10


# --- settings ---

def test_load_settings_reads_environment_once(monkeypatch):
    monkeypatch.setattr("reposcope.config.load_dotenv", lambda: False)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.delenv("OPENAI_BASE_URL", raising=False)

    settings = load_settings()
    assert settings.api_key == "sk-env"
    assert settings.model == DEFAULT_MODEL
    assert settings.temperature == DEFAULT_TEMPERATURE
    assert settings.base_url is None

    overridden = load_settings(model="gpt-other", temperature=0.0)
    assert overridden.model == "gpt-other"
    assert overridden.temperature == 0.0


def test_load_settings_without_key(monkeypatch):
    monkeypatch.setattr("reposcope.config.load_dotenv", lambda: False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    assert load_settings().api_key is None
