"""Pack command - compress store files and write the release manifest."""

from collections.abc import Iterator

from ...utils.logger import get_logger
from .._output_schemas.manifest import ManifestPackOutput
from ..config.load_config_with_output import load_config_with_output
from ..errors.CtxpackError import CtxpackError
from ..logger.PythonLogger import PythonLogger
from ..StageResult import StageResult
from .build_manifest import build_manifest

DEFAULT_EMBEDDING_DIM = 1536


def cmd_pack(dim: int | None = None, model: str = "") -> StageResult:
    """Gzip every <repo>.jsonl in the store and write index-manifest.json.

    Args:
        dim: Embedding dimension to record (defaults to embedding.dim, then 1536)
        model: Embedding model to record (defaults to embedding.model)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config, error_output = load_config_with_output(ManifestPackOutput)
        if config is None:
            result_obj.result = "Failed to load configuration"
            result_obj.output = error_output or {}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        store_dir = config.store.path
        embedding_dim = dim or config.embedding.dim or DEFAULT_EMBEDDING_DIM

        yield (0.3, f"Packaging {store_dir}...")
        try:
            manifest = build_manifest(
                store_dir,
                pack=config.pack,
                version=config.release.version,
                embedding_model=model or config.embedding.model,
                embedding_dim=embedding_dim,
                manifest_name=config.release.manifest_name,
                logger=PythonLogger(get_logger("pack")),
            )
        except (CtxpackError, OSError) as e:
            result_obj.result = f"Pack failed: {e}"
            result_obj.output = ManifestPackOutput(
                errors=[str(e)],
                warnings=[],
                store_dir=str(store_dir),
                version=config.release.version,
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (1.0, "Complete")
        result_obj.result = f"Packaged {len(manifest.files)} index files for {manifest.version}"
        result_obj.output = ManifestPackOutput(
            errors=[],
            warnings=[],
            store_dir=str(store_dir),
            manifest_path=str(store_dir / config.release.manifest_name),
            version=manifest.version,
            files=[f.model_dump(mode="python") for f in manifest.files],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Packaging indexes...",
        progress_callback=do_work,
    )
