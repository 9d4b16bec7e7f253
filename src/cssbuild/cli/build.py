"""CLI command: cssbuild build -- assemble a selector from part tokens."""

from __future__ import annotations

import logging
import sys

import click

from cssbuild.builder import SelectorBuilder
from cssbuild.codec import to_json
from cssbuild.config import CssBuildConfig
from cssbuild.errors import SelectorValidationError
from cssbuild.facade import combine
from cssbuild.model.part import Combinator, PartKind

logger = logging.getLogger(__name__)

# Token prefixes accepted for each part kind (``kind=value``).
PART_TOKENS: dict[str, PartKind] = {
    "element": PartKind.ELEMENT,
    "id": PartKind.ID,
    "class": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "attribute": PartKind.ATTRIBUTE,
    "pseudo-class": PartKind.PSEUDO_CLASS,
    "pseudo-element": PartKind.PSEUDO_ELEMENT,
}

COMBINATOR_TOKENS: dict[str, Combinator] = {
    "descendant": Combinator.DESCENDANT,
    "child": Combinator.CHILD,
    ">": Combinator.CHILD,
    "next-sibling": Combinator.NEXT_SIBLING,
    "+": Combinator.NEXT_SIBLING,
    "subsequent-sibling": Combinator.SUBSEQUENT_SIBLING,
    "~": Combinator.SUBSEQUENT_SIBLING,
}


def _split_tokens(
    tokens: tuple[str, ...],
) -> tuple[list[list[tuple[PartKind, str]]], list[Combinator]]:
    """Group part tokens into compounds separated by combinator tokens."""
    compounds: list[list[tuple[PartKind, str]]] = [[]]
    combinators: list[Combinator] = []
    for token in tokens:
        if token in COMBINATOR_TOKENS:
            if not compounds[-1]:
                raise click.UsageError(
                    f"Combinator {token!r} must follow a selector part"
                )
            combinators.append(COMBINATOR_TOKENS[token])
            compounds.append([])
            continue
        name, sep, value = token.partition("=")
        if not sep or name not in PART_TOKENS:
            raise click.UsageError(
                f"Invalid token {token!r}: expected KIND=VALUE with KIND one of "
                f"{', '.join(PART_TOKENS)}, or a combinator"
            )
        compounds[-1].append((PART_TOKENS[name], value))
    if not compounds[-1]:
        raise click.UsageError("Selector must end with a selector part")
    return compounds, combinators


def _assemble(
    compounds: list[list[tuple[PartKind, str]]], combinators: list[Combinator]
) -> SelectorBuilder:
    builders: list[SelectorBuilder] = []
    for parts in compounds:
        builder = SelectorBuilder()
        for kind, value in parts:
            builder.add(kind, value)
        builders.append(builder)

    # Right-nested: a + (b ~ (c d))
    result = builders[-1]
    for left, combinator in zip(reversed(builders[:-1]), reversed(combinators)):
        result = combine(left, combinator, result)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_obj
def build(config: CssBuildConfig | None, tokens: tuple[str, ...], as_json: bool) -> None:
    """Build a selector from TOKENS and print it.

    Each token is KIND=VALUE (element, id, class, attr, pseudo-class,
    pseudo-element) or a combinator (descendant, child, next-sibling,
    subsequent-sibling, or one of > + ~) that starts a new compound.

    Example: cssbuild build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    config = config or CssBuildConfig()
    compounds, combinators = _split_tokens(tokens)

    try:
        selector = _assemble(compounds, combinators).stringify()
    except SelectorValidationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    logger.info("Built selector from %d token(s)", len(tokens))
    if as_json:
        click.echo(
            to_json(
                {"selector": selector},
                sort_keys=config.json_sort_keys,
                indent=config.json_indent,
            )
        )
    else:
        click.echo(selector)
