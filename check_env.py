import sys
import importlib
import importlib.util

print(f"Python Version: {sys.version}")

def check_package(name):
    if importlib.util.find_spec(name):
        try:
            lib = importlib.import_module(name)
            print(f"SUCCESS: '{name}' is installed. Version: {getattr(lib, '__version__', 'unknown')}")
            return lib
        except ImportError as e:
            print(f"ERROR: '{name}' is installed but could not be imported. {e}")
    else:
        print(f"MISSING: '{name}' is NOT installed.")
    return None

yaml_lib = check_package("yaml")
pytest_lib = check_package("pytest")
core_lib = check_package("Gobstones_Core")

if yaml_lib and core_lib:
    try:
        translator = core_lib.translations.bundled_translator()
        board = core_lib.Board(3, 2)
        board.get_cell().add_stones(core_lib.Color.RED, 2)
        print(f"Bundled locales: {', '.join(translator.get_available_translations())}")
        print(board)
        print("Board Test PASSED!")
    except (core_lib.BoardError, ValueError, OSError) as e:
        print(f"Board Test FAILED: {e}")
else:
    print("Skipping board test due to missing packages.")
