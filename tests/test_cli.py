"""
CLI smoke tests.
"""

from unittest.mock import AsyncMock, MagicMock, patch

from typer.testing import CliRunner

from helix.main import app
from helix.domain.profiles import SavedSnapshot
from helix.store import JsonFileStore, SnapshotRepository

runner = CliRunner()


def _stream_client(tokens: list[str]) -> AsyncMock:
    chunks = []
    for token in tokens:
        chunk = MagicMock()
        chunk.choices = [MagicMock()]
        chunk.choices[0].delta.content = token
        chunks.append(chunk)

    async def async_iter():
        for c in chunks:
            yield c

    client = AsyncMock()
    client.chat.completions.create.return_value = async_iter()
    return client


class TestBasics:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "Helix version" in result.output

    def test_health(self):
        result = runner.invoke(app, ["health"])

        assert result.exit_code == 0
        assert "All checks passed" in result.output


class TestCatalogCommand:
    def test_lists_records(self):
        result = runner.invoke(app, ["catalog", "ingredients", "--search", "lime"])

        assert result.exit_code == 0
        assert "ING_LIME" in result.output
        assert "ING_HONEY" not in result.output

    def test_category_filter(self):
        result = runner.invoke(app, ["catalog", "ingredients", "--category", "herb"])

        assert result.exit_code == 0
        assert "ING_BASIL" in result.output
        assert "ING_LIME" not in result.output

    def test_unknown_kind(self):
        result = runner.invoke(app, ["catalog", "spaceships"])

        assert result.exit_code == 1
        assert "Unknown catalog" in result.output


class TestBlendCommand:
    def test_shows_derived_profile(self):
        result = runner.invoke(app, ["blend", "flavour", "ING_LIME:50", "ING_GREEN_APPLE:50"])

        assert result.exit_code == 0
        # mean(9, 7)
        assert "8" in result.output
        assert "50.0%" in result.output

    def test_invalid_weight(self):
        result = runner.invoke(app, ["blend", "flavour", "ING_LIME:lots"])

        assert result.exit_code == 1
        assert "Invalid weight" in result.output

    def test_unknown_lab(self):
        result = runner.invoke(app, ["blend", "gastronomy", "ING_LIME"])

        assert result.exit_code == 1


class TestAnalyzeCommand:
    def test_streams_and_saves(self, tmp_path):
        client = _stream_client(["Crisp ", "and ", "bright."])

        with patch("helix.llm.client.get_raw_async_client", return_value=client):
            result = runner.invoke(app, ["analyze", "flavour", "ING_LIME", "--save", "Lime test"])

        assert result.exit_code == 0, result.output
        assert "Crisp and bright." in result.output
        saved = SnapshotRepository(JsonFileStore(tmp_path / "store.json"), "flavourHistory").list()
        assert [s.name for s in saved] == ["Lime test"]
        assert saved[0].generated_text == "Crisp and bright."

    def test_generation_failure_exits_1(self, monkeypatch):
        from helix.config import settings

        monkeypatch.setenv("OPENAI_API_KEY", "")
        settings.reset()

        result = runner.invoke(app, ["analyze", "synthesis", "COMP_001"])

        assert result.exit_code == 1
        assert "API Key Error" in result.output

    def test_unknown_mode(self):
        result = runner.invoke(app, ["analyze", "flavour", "--mode", "turbo"])

        assert result.exit_code == 1

    def test_gastronomy_with_parameters(self):
        client = _stream_client(["Protocol."])

        with patch("helix.llm.client.get_raw_async_client", return_value=client):
            result = runner.invoke(app, [
                "analyze", "gastronomy",
                "--ingredient", "ING_LIME",
                "--technique", "TECH_SOUS_VIDE",
                "--param", "Temperature=58",
            ])

        assert result.exit_code == 0, result.output
        prompt = client.chat.completions.create.call_args.kwargs["messages"][0]["content"]
        assert "- Temperature: 58 C" in prompt


class TestGenerateCommand:
    def test_generate_ingredient(self):
        from helix.domain.entities import Ingredient, IngredientDNA

        ingredient = Ingredient(
            id="gen-1",
            name="Yuzu",
            type="fruit",
            dna=IngredientDNA(
                acids=8, sugars=2, bitterness=3, aromatics=9, aldehydes=6,
                esters=4, umami=0, texture=1, water_content=8,
            ),
        )

        with patch("helix.catalog.generate.generate_ingredient_profile", AsyncMock(return_value=ingredient)):
            result = runner.invoke(app, ["generate", "ingredient", "Yuzu"])

        assert result.exit_code == 0, result.output
        assert '"Yuzu"' in result.output

    def test_unknown_kind(self):
        result = runner.invoke(app, ["generate", "planet", "Mars"])

        assert result.exit_code == 1


class TestSnapshotCommands:
    def _seed(self, tmp_path) -> SavedSnapshot:
        snapshot = SavedSnapshot(name="Seeded", lab="cordial", profile={})
        SnapshotRepository(JsonFileStore(tmp_path / "store.json"), "cordialHistory").add(snapshot)
        return snapshot

    def test_list_empty(self):
        result = runner.invoke(app, ["snapshots", "cordial"])

        assert result.exit_code == 0
        assert "No snapshots saved" in result.output

    def test_list(self, tmp_path):
        self._seed(tmp_path)

        result = runner.invoke(app, ["snapshots", "cordial"])

        assert result.exit_code == 0
        assert "Seeded" in result.output

    def test_delete(self, tmp_path):
        snapshot = self._seed(tmp_path)

        result = runner.invoke(app, ["delete-snapshot", "cordial", snapshot.id])

        assert result.exit_code == 0
        assert SnapshotRepository(JsonFileStore(tmp_path / "store.json"), "cordialHistory").list() == []

    def test_delete_unknown(self):
        result = runner.invoke(app, ["delete-snapshot", "cordial", "nope"])

        assert result.exit_code == 1
