"""Task brief assembled from per-repo search hits."""

from dataclasses import dataclass, field

from .ScoredChunk import ScoredChunk

HEADING_SEPARATOR = " › "


@dataclass(frozen=True)
class BriefSection:
    """Hits for one repo, strongest rule level first."""

    repo: str
    hits: list[ScoredChunk] = field(default_factory=list)


@dataclass(frozen=True)
class Brief:
    """A compact, markdown-renderable digest of the store for one task."""

    task: str
    sections: list[BriefSection] = field(default_factory=list)
    title: str = "Context Pack"
    order: list[str] = field(default_factory=list)

    def render(self) -> str:
        """Markdown: precedence note, then one section per repo."""
        upstream = f" ({self.order[0]})" if self.order else ""
        lines = [
            f"# {self.title} Task Brief",
            f"Task: {self.task}",
            "",
            f"**Rules precedence:** MUST > SHOULD > MUST NOT. Upstream{upstream} overrides downstream on conflict.",
            "",
        ]
        for section in self.sections:
            lines.append(f"## {section.repo}")
            for hit in section.hits:
                lines.append(f"### {HEADING_SEPARATOR.join(hit.chunk.headings)}")
                if hit.chunk.rule_level:
                    lines.append(f"**{hit.chunk.rule_level}**")
                lines.extend([hit.chunk.text, ""])
        return "\n".join(lines)
