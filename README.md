# enjambre

Building blocks for a code-generation agent tool: a catalogue of specialised
neural model specifications with keyword-based selection, a runner that sends
prompts to the Gemini command-line client, configuration read from the
environment, and the console handlers that print the tool's reports.

The package has no third-party dependencies.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Neural model catalogue

`enjambre.neuro_divergent.available_models()` returns four `ModelSpec`
entries, each built fresh: an LSTM, an N-BEATS, a Transformer and a custom
feed-forward network (`LSTMModel`, `NBEATSModel`, `TransformerModel`,
`CustomFANNModel`). `TCNModel` and `CNNModel` describe further architectures.
Each spec carries its `ModelCapabilities`, a description, use cases and a
performance score.

`select_best_model_for_task` picks a spec from keywords in a (Spanish) task
description: "predicción", "forecasting" or "serie" choose the LSTM, or the
N-BEATS model when "alta precisión" or "avanzado" also appears; "código",
"texto" or "lenguaje" choose the Transformer; anything else chooses the custom
network.

```python
from enjambre.neuro_divergent import NBEATSModel, select_best_model_for_task

spec = select_best_model_for_task("Predicción de ventas con alta precisión")
assert isinstance(spec.model_type, NBEATSModel)
```

## Running the Gemini command-line client

`enjambre.process_manager.GeminiProcessManager` starts one process per prompt
with `npx @google/gemini-cli --yolo` (through `cmd /C` on Windows; see
`build_command`), writes the prompt to its standard input and returns its
trimmed standard output. A non-zero exit status, a missing executable or a
timeout (120 seconds by default) raises `ProcessManagerError`. Node.js must be
installed. The manager is a context manager; leaving it kills any running
process.

```python
from enjambre.process_manager import GeminiProcessManager

with GeminiProcessManager(timeout=60) as manager:
    answer = manager.execute_command("Write a function that reverses a string")
```

`is_prompt_ready` and `is_confirmation_prompt` recognise client output that
waits for input or asks for a `[y/N]` confirmation.

## Configuration

`enjambre.settings.CliConfig.from_env()` reads `GEMINI_API_KEY`,
`DEFAULT_ADAPTER`, `MAX_CONCURRENT_TASKS`, `ENABLE_NEURAL_SELECTION`,
`ENABLE_ADAPTIVE_LEARNING` and `LOG_LEVEL`, falling back to the defaults
(`gemini`, 4, true, true, `info`) where a variable is missing or malformed. A
mapping can be passed instead of the process environment. `config_dir()`
returns `~/.enjambre`.

## Console handlers

`enjambre.console` provides `style` (ANSI colours and bold), the
`print_success` / `print_info` / `print_error` status lines, `print_banner`
and `print_quick_help`.

The `enjambre.commands` sub-package holds the report handlers:

- `commands.neural`: `list_models`, `train`, `predict`, `analyze`, plus
  `describe_model_type`, `capability_flags` and `find_model`
  (e.g. `find_model("lstm")` returns the LSTM spec).
- `commands.tools`: `list_tools`, `tool_info` (returns whether the tool is in
  the catalogue) and `execute_tool`.
- `commands.hive_mind`: `wizard`, `status` and `coordination_test`.
- `commands.basic`: configuration, memory, performance, workflow and
  system-test reports (`run_system_test` takes a `SystemComponent`), and
  `run_interactive_wizard`.

## What the package does not do

- It installs no command: there is no `enjambre` program and no argument
  parser. The handlers above are called from Python.
- It does not call the Gemini HTTP API, choose models by cost, estimate
  request costs or enforce budgets.
- The memory, configuration, workflow, performance and test handlers only
  print fixed status messages; nothing is stored, read, exported or measured.
  The tool handlers likewise report canned results rather than running tools,
  and the neural handlers do not train or run any network.