from typing import List, Optional
from dataclasses import dataclass, field

from polyset.polyset_datatypes import MappingContainer, SequenceContainer
from polyset.polyset_dispatch import set_item
from polyset.polyset_printer import Printer


@dataclass
class DemoResult:
    """The containers and set outcomes produced by one demo run."""
    mapping: MappingContainer
    sequence: SequenceContainer
    mapping_ok: bool = False
    sequence_ok: bool = False
    printer: Printer = field(default_factory=Printer, repr=False)

    def lines(self) -> List[str]:
        """The console report, one line per entry."""
        p = self.printer
        return [
            f"dict:{p.pformat(self.mapping_ok)}",
            f"d:'{p.pformat_inline(self.mapping)}'",
            f"list:{p.pformat(self.sequence_ok)}",
            f"l:'{p.pformat_inline(self.sequence)}'",
        ]


class DemoRunner:
    """Builds a mapping and a sequence and assigns into each through set_item()."""

    def __init__(self, printer: Optional[Printer] = None):
        self.printer = printer or Printer()

    def run(self) -> DemoResult:
        mapping = MappingContainer()
        sequence = SequenceContainer(["1", "2"])
        result = DemoResult(mapping=mapping, sequence=sequence, printer=self.printer)
        result.mapping_ok = set_item(mapping, "foo", "bar")
        result.sequence_ok = set_item(sequence, 1, "bar")
        return result
