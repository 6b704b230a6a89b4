"""Platform-neutral chat messages.

Command handlers return these; a chat platform adapter turns them into
its own message and embed objects.
"""

from dataclasses import dataclass, field

# Default embed colour (dodger blue)
EMBED_COLOR = 0x1E90FF


@dataclass
class EmbedField:
    """Named field inside an embed."""

    name: str
    value: str
    inline: bool = False


@dataclass
class Embed:
    """Rich message card.

    Attributes:
        title: Card title.
        color: Accent colour as 0xRRGGBB.
        description: Free text body.
        fields: Named fields in display order.
        footer: Footer text.
    """

    title: str
    color: int = EMBED_COLOR
    description: str | None = None
    fields: list[EmbedField] = field(default_factory=list)
    footer: str | None = None

    def add_field(self, name: str, value: str, inline: bool = False) -> "Embed":
        """Append a field and return self for chaining."""
        self.fields.append(EmbedField(name=name, value=value, inline=inline))
        return self

    def to_text(self) -> str:
        """Render as plain text (CLI output, logs)."""
        lines = [self.title]
        if self.description:
            lines.append(self.description)
        for embed_field in self.fields:
            lines.append(f"{embed_field.name}: {embed_field.value}")
        if self.footer:
            lines.append(f"-- {self.footer}")
        return "\n".join(lines)


@dataclass
class Reply:
    """A message produced by a command.

    Attributes:
        content: Message text.
        embeds: Embeds attached to the message.
        ephemeral: Only visible to the invoking user.
        channel_id: Post to this channel instead of replying to the
            command invocation.
    """

    content: str = ""
    embeds: list[Embed] = field(default_factory=list)
    ephemeral: bool = False
    channel_id: str | None = None

    def to_text(self) -> str:
        """Render as plain text (CLI output, logs)."""
        parts = [self.content] if self.content else []
        parts.extend(embed.to_text() for embed in self.embeds)
        return "\n\n".join(parts)


def error_reply(message: str) -> Reply:
    """Ephemeral reply for a failed command."""
    return Reply(content=message, ephemeral=True)
