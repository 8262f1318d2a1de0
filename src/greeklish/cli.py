import argparse
import json
import logging
import sys
from typing import Optional

import pandas as pd

from .config import Settings, load_config
from .pipeline import expand_terms
from .preprocess import normalize_token


def _detect_sep(path: str) -> str:
    """
    Heuristic: prefer tab if tabs appear in the header; otherwise comma.
    """
    try:
        with open(path, "rb") as fh:
            head = fh.read(2048).decode("utf-8", errors="ignore")
    except OSError:
        # If detection fails, default to comma
        return ","
    header = head.splitlines()[0] if head else ""
    return "\t" if "\t" in header else ","


def _read_table(path_in: str, sep_arg: str) -> pd.DataFrame:
    if sep_arg == "csv":
        sep = ","
    elif sep_arg == "tsv":
        sep = "\t"
    else:  # auto
        sep = _detect_sep(path_in)
    return pd.read_csv(path_in, sep=sep, keep_default_na=False)


def build_settings(
    cfg_path: Optional[str] = None,
    max_expansions: Optional[int] = None,
    no_variants: bool = False,
    special_mapping: bool = False,
) -> Settings:
    settings = load_config(cfg_path) if cfg_path else Settings()
    # command line flags win over the YAML file
    if max_expansions is not None:
        if max_expansions <= 0:
            raise SystemExit(f"--max-expansions must be positive (got {max_expansions})")
        settings = Settings(max_expansions, settings.generate_variants, settings.use_special_mapping)
    if no_variants:
        settings = Settings(settings.max_expansions, False, settings.use_special_mapping)
    if special_mapping:
        settings = Settings(settings.max_expansions, settings.generate_variants, True)
    return settings


def main(
    path_in: str,
    settings: Settings,
    out_path: Optional[str] = "-",
    sep_arg: str = "auto",
    normalize: bool = False,
) -> pd.DataFrame:
    # Load words
    df = _read_table(path_in, sep_arg)

    # Validate columns
    if "word" not in df.columns:
        raise SystemExit("Input must contain a 'word' column (optional: word_id)")

    words = [str(w) for w in df["word"]]
    terms = [normalize_token(w) for w in words] if normalize else words
    expanded = expand_terms(terms, settings)

    # Process rows
    rows = []
    for i, (word, term) in enumerate(zip(words, terms)):
        spellings = expanded[term]
        row = {"word_id": df["word_id"].iloc[i]} if "word_id" in df.columns else {}
        row.update(
            {
                "word": word,
                "applicable": int(spellings is not None),
                "n_spellings": len(spellings or []),
                # Spellings as JSON string for safe CSV embedding
                "spellings": json.dumps(spellings or [], ensure_ascii=False),
            }
        )
        rows.append(row)

    out_df = pd.DataFrame(rows, columns=["word_id", "word", "applicable", "n_spellings", "spellings"])
    if "word_id" not in df.columns:
        out_df = out_df.drop(columns=["word_id"])

    # Write output
    if out_path in (None, "-"):
        out_df.to_csv(sys.stdout, index=False)
    else:
        out_df.to_csv(out_path, index=False)
    return out_df


if __name__ == "__main__":
    p = argparse.ArgumentParser(description="greeklish-expander CLI")
    p.add_argument("--in", dest="path_in", required=True, help="Input CSV/TSV with a 'word' column")
    p.add_argument("--config", default=None, help="YAML settings file")
    p.add_argument(
        "--out", dest="out_path", default="-", help="Output CSV path (use '-' for stdout)"
    )
    p.add_argument(
        "--sep", dest="sep", default="auto", choices=["auto", "csv", "tsv"], help="Input delimiter"
    )
    p.add_argument("--max-expansions", type=int, default=None, help="Spellings per Greek word")
    p.add_argument("--no-variants", action="store_true", help="Skip singular/plural variants")
    p.add_argument("--special-mapping", action="store_true", help="Use the alternate letter mapping")
    p.add_argument("--normalize", action="store_true", help="Lowercase and strip accents first")
    p.add_argument("--verbose", action="store_true", help="Debug logging on stderr")
    a = p.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if a.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    try:
        s = build_settings(a.config, a.max_expansions, a.no_variants, a.special_mapping)
    except ValueError as e:
        raise SystemExit(str(e)) from e
    main(a.path_in, s, a.out_path, a.sep, a.normalize)
