# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ScriptedConsole:
    """
    Stand-in for input()/print() in console connector tests.

    - `lines` are returned one by one from read(); EOFError once exhausted
    - everything written is captured in `out` (prompts in `prompts`)
    """

    lines: list[str]
    prompts: list[str] = field(default_factory=list)
    out: list[str] = field(default_factory=list)

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def write(self, text: str) -> None:
        self.out.append(text)

    def joined(self) -> str:
        return "\n".join(self.out)
