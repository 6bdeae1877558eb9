"""
cli.py - command line front end for the catalog trie
Features:
- Loads catalog words from a text file (one per line) into a Trie
- Prefix checks and completion listings, rendered with Rich tables
- Live config edits (/config key val) persisted to config.json
- Per-command timing kept for /stats
"""

import argparse
import shlex
from typing import Iterable, Iterator, List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from catalog_autocompleter.core.errors import ReservedCharacterInInput
from catalog_autocompleter.core.protocols import CompletionIndex
from catalog_autocompleter.utils.cache_utils import Timings, average_ms, record, timed
from catalog_autocompleter.utils.config_manager import Config
from catalog_autocompleter.utils.logger_utils import configure, get_logger

log = get_logger(__name__)

HELP = [
    ("/load <word>", "add one word"),
    ("/file <path>", "add every word in a file (one per line)"),
    ("/match <prefix>", "does any word start with prefix"),
    ("/complete <prefix>", "list words starting with prefix (plain text does the same)"),
    ("/stats", "word count and average timings"),
    ("/config [key val]", "show or change settings"),
    ("/help", "this table"),
    ("/quit", "leave"),
]


def read_word_file(path: str) -> Iterator[str]:
    """Yield stripped words from `path`, skipping blank and #comment lines."""
    with open(path, "r", encoding="utf8") as f:
        for line in f:
            word = line.strip()
            if word and not word.startswith("#"):
                yield word


def load_words(index: CompletionIndex, words: Iterable[str]) -> Tuple[int, int]:
    """
    Load words one by one, skipping (and logging) any that carry the terminator.
    Returns (added, skipped).
    """
    added = skipped = 0
    for word in words:
        try:
            if index.load(word):
                added += 1
        except ReservedCharacterInInput as e:
            log.warning(f"skipping {e.word!r}: reserved {e.character!r}")
            skipped += 1
    return added, skipped


class CLI:
    """Interactive loop over a CompletionIndex, mostly thin wrappers that print."""

    def __init__(
        self,
        cfg: Config,
        index: Optional[CompletionIndex] = None,
        console: Optional[Console] = None,
    ):
        self.cfg = cfg
        self.index = index if index is not None else cfg.build_trie()
        self.console = console or Console()
        self.running = True
        self.timings: Timings = {}

    def run(self):
        self.console.rule("[bold magenta]Catalog Autocompleter[/bold magenta]")
        self.console.print("[cyan]Type a prefix to list completions, /help for commands.[/cyan]")
        while self.running:
            try:
                line = Prompt.ask("[green]prefix[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                break
            self.handle(line)

    # COMMAND HANDLING -----------------------------------------------------------
    def handle(self, line: str) -> bool:
        """Run one input line. Returns False once the user asked to quit."""
        line = line.strip()
        if not line:
            return self.running
        if not line.startswith("/"):
            self.complete(line)
            return self.running

        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Bad input:[/red] {escape(str(e))}")
            return self.running
        cmd, args = parts[0].lower(), parts[1:]

        try:
            if cmd in ("/q", "/quit", "/exit"):
                self.running = False
                self.console.print("bye.")
            elif cmd == "/help":
                self.show_help()
            elif cmd == "/load" and args:
                self.load_word(" ".join(args))
            elif cmd == "/file" and len(args) == 1:
                self.load_file(args[0])
            elif cmd == "/match" and args:
                self.match(" ".join(args))
            elif cmd == "/complete":
                self.complete(" ".join(args))
            elif cmd == "/stats":
                self.show_stats()
            elif cmd == "/config":
                self.config(args)
            else:
                self.console.print(f"[red]Unknown command:[/red] {escape(line)}")
        except ReservedCharacterInInput as e:
            self.console.print(f"[red]Rejected:[/red] {escape(str(e))}")
        except OSError as e:
            self.console.print(f"[red]File error:[/red] {escape(str(e))}")
        except (KeyError, ValueError) as e:
            self.console.print(f"[red]Config error:[/red] {escape(str(e))}")
        return self.running

    # ACTIONS --------------------------------------------------------------------
    def load_word(self, word: str):
        added, _ = timed("load", self.timings)(self.index.load)(word)
        if added:
            self.console.print(f"[green]Loaded:[/green] {escape(word)}")
        else:
            self.console.print(f"[dim]{escape(repr(word))} already indexed[/dim]")

    def load_file(self, path: str) -> Tuple[int, int]:
        """Load a word file; words with the terminator are skipped and counted."""
        with log.time_block(f"load {path}") as t:
            added, skipped = load_words(self.index, read_word_file(path))
        record(self.timings, "file", t.elapsed)
        msg = f"[green]Loaded {added} new words[/green] from {escape(path)} ({t.elapsed * 1000:.1f} ms)"
        if skipped:
            msg += f", [yellow]{skipped} skipped[/yellow]"
        self.console.print(msg)
        return added, skipped

    def match(self, prefix: str):
        ok, _ = timed("match", self.timings)(self.index.match_prefix)(prefix)
        if ok:
            self.console.print(f"[green]match[/green] {escape(repr(prefix))}")
        else:
            self.console.print(f"[red]no match[/red] {escape(repr(prefix))}")

    def complete(self, prefix: str) -> List[str]:
        limit = int(self.cfg.get("max_suggestions")) or None
        words, _ = timed("complete", self.timings)(self.index.find_completions)(prefix, limit=limit)
        if not words:
            self.console.print("[dim](no completions)[/dim]")
            return words

        table = Table(title=f"Completions for {escape(repr(prefix))}", box=box.SIMPLE_HEAVY)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("word", style="bold")
        for i, w in enumerate(words, 1):
            table.add_row(str(i), escape(w))
        self.console.print(table)
        return words

    # DISPLAY -------------------------------------------------------------------------------
    def show_help(self):
        table = Table(title="Commands", box=box.SIMPLE)
        table.add_column("command", style="cyan")
        table.add_column("does")
        for c, d in HELP:
            table.add_row(escape(c), d)
        self.console.print(table)

    def show_stats(self):
        table = Table(title="Stats", box=box.SIMPLE)
        table.add_column("metric", style="cyan")
        table.add_column("value", justify="right")
        table.add_row("words", str(len(self.index)))
        for label, ms in sorted(average_ms(self.timings).items()):
            table.add_row(f"{label} avg ms", f"{ms:.3f}")
        self.console.print(table)

    def config(self, args: List[str]):
        if not args:
            table = Table(title="Config", box=box.SIMPLE)
            table.add_column("key", style="cyan")
            table.add_column("value")
            for k, v in self.cfg.items():
                table.add_row(k, escape(repr(v)))
            self.console.print(table)
            return
        if len(args) != 2:
            self.console.print(escape("usage: /config [key val]"))
            return
        key, val = args
        self.cfg.set(key, val)
        self.console.print(escape(f"{key} = {self.cfg.get(key)!r}"))
        if key in ("terminator", "root_value", "sort_completions"):
            self.console.print("[yellow]takes effect on next start[/yellow]")
        elif key in ("log_level", "log_path"):
            configure(level=self.cfg.get("log_level"), path=self.cfg.get("log_path"))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="catalog-autocompleter",
        description="Index catalog words in a trie and query prefixes interactively.",
    )
    parser.add_argument("--words", "-w", help="word file to load at start (one word per line)")
    parser.add_argument("--config", "-c", default="config.json", help="path to config.json")
    args = parser.parse_args(argv)

    cfg = Config(args.config)
    configure(level=cfg.get("log_level"), path=cfg.get("log_path"))
    cli = CLI(cfg)
    if args.words:
        try:
            cli.load_file(args.words)
        except OSError as e:
            log.error(f"cannot read {args.words}: {e}")
            return 1
    cli.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
