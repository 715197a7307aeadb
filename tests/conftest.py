from __future__ import annotations

from pathlib import Path
import stat
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


CARBONARA = """---
category:  Dinner
cook_time: 30
cuisine:   Italian
favorite:  true
prep_time: 15
source:    Grandma's cookbook
yields:    4 servings
---

= Classic Spaghetti Carbonara

> A classic Roman pasta dish.
> Use guanciale for the most authentic flavor.

+ Prepare Ingredients

# Cook the pasta

- 1 lb spaghetti
- Salt for water

# Prepare the egg mixture

- 4 large egg yolks
- 1/2 cup grated Pecorino Romano cheese
- Black pepper

+ Cook

# Render the guanciale

- 4 oz guanciale, diced

# Combine everything
"""

SALAD = """= Simple Salad

# Combine greens and dressing

- 1 bag mixed greens
- 2 tbsp olive oil
- 1 tbsp lemon juice
"""

BROWNIES = """---
category: Dessert
yield: 9x13 pan
---

= Brownies

# Bake at 350°F for 25-30 minutes

- 3/4 cup cocoa
"""


@pytest.fixture()
def carbonara_text() -> str:
    return CARBONARA


@pytest.fixture()
def salad_text() -> str:
    return SALAD


@pytest.fixture()
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture()
def example_library(tmp_path: Path) -> Path:
    library = tmp_path / "Library"
    recipes = library / "Recipes"
    cookbooks = library / "Cookbooks"
    (recipes / "Desserts").mkdir(parents=True)
    cookbooks.mkdir(parents=True)
    (recipes / "Carbonara.recipe").write_text(CARBONARA, encoding="utf-8")
    (recipes / "Salad.recipe").write_text(SALAD, encoding="utf-8")
    (recipes / "Desserts" / "Brownies.recipe").write_text(BROWNIES, encoding="utf-8")
    (cookbooks / "Family.yaml").write_text(
        "title: Family Favourites\nsubtitle: From our kitchen\nrecipes:\n  - Carbonara\n  - Desserts/Brownies\n",
        encoding="utf-8",
    )
    (cookbooks / "Everything.yml").write_text("title: Everything\n", encoding="utf-8")
    return library


@pytest.fixture()
def mock_typst(tmp_path: Path) -> Path:
    script = tmp_path / "typst"
    script.write_text(
        """#!/usr/bin/env python3
import sys

args = sys.argv[1:]
if not args or args[0] != "compile":
    sys.stderr.write("unexpected arguments")
    sys.exit(2)
with open(args[-1], "wb") as fh:
    fh.write(b"%PDF-1.7\\n%mock")
""",
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IEXEC)
    return script


@pytest.fixture()
def failing_typst(tmp_path: Path) -> Path:
    script = tmp_path / "typst-fail"
    script.write_text(
        """#!/usr/bin/env python3
import sys

sys.stderr.write("error: unknown variable")
sys.exit(1)
""",
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IEXEC)
    return script
