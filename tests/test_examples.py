import importlib.util
import os

import matplotlib.pyplot as plt
import pytest

EXAMPLES_DIR = os.path.join(os.path.dirname(__file__), "..", "examples")


def load_example(name):
    path = os.path.join(EXAMPLES_DIR, name + ".py")
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.parametrize(
    "name",
    ["gpreg_example01_1d_regression", "gpreg_example02_sample_paths"],
)
def test_example_runs(name):
    load_example(name).main(show=False)
    plt.close("all")
