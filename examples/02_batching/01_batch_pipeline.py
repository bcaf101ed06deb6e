"""
Composing operations into a pipeline that writes rows in batches.
The batch size comes from a YAML file when one is given on the command line.
"""
import sys

from reeks import ConfigValue, batch_apply, filter_, map_, stage


def write_batch(batch_number, rows):
    print(f"batch {batch_number}: {sorted(rows.values())}")


pipeline = (
    stage(map_, lambda key, word: word.strip().lower())
    | stage(filter_, lambda key, word: bool(word))
    | stage(batch_apply, ConfigValue("batch.size", 2), write_batch)
)


def main():
    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    words = ["Lazy ", "", "Keyed", " Streams", "Batch", "  "]
    print("--- Writing batches ---")
    pipeline.run(words, config_path=config_path)


if __name__ == "__main__":
    main()
