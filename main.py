"""Run the grouping annealer from a YAML/JSON config (see sa_engine.glue.pipeline)."""

from sa_engine.glue.pipeline import main as pipeline_main


def main() -> None:
    pipeline_main()


if __name__ == "__main__":
    main()
