"""Compilation and execution of the per-type XSL stylesheets."""

from __future__ import annotations

import logging

from lxml import etree

from .errors import TransformCompileError, TransformExecutionError
from .resources import ResourceResolver, TransformResource

logger = logging.getLogger(__name__)

# Stylesheets only reshape the document; they never touch the network or disk.
_ACCESS_CONTROL = etree.XSLTAccessControl(
    read_network=False,
    write_network=False,
    create_dir=False,
    write_file=False,
)


def compile_stylesheet(resource: TransformResource) -> etree.XSLT:
    """Compile *resource* into an executable XSLT program."""

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        xsl = etree.fromstring(resource.content, parser, base_url=resource.location)
    except etree.XMLSyntaxError as exc:
        raise TransformCompileError(
            f"Stylesheet {resource.location} is not well-formed XML: {exc.msg}",
            location=resource.location,
        ) from exc

    try:
        return etree.XSLT(xsl, access_control=_ACCESS_CONTROL)
    except etree.XSLTParseError as exc:
        raise TransformCompileError(
            f"Stylesheet {resource.location} could not be compiled: {exc}",
            location=resource.location,
        ) from exc


def run_stylesheet(
    program: etree.XSLT, document: etree._ElementTree, *, label: str = ""
) -> str:
    """Execute *program* against *document* and return the serialised result."""

    try:
        result = program(document)
    except etree.XSLTApplyError as exc:
        log = str(program.error_log)
        raise TransformExecutionError(
            f"Transformation for {label!r} failed: {exc}", label=label, log=log
        ) from exc

    if result.getroot() is None:
        raise TransformExecutionError(
            f"Transformation for {label!r} produced no document",
            label=label,
            log=str(program.error_log),
        )

    return str(result)


def apply(
    document: etree._ElementTree, label: str, resolver: ResourceResolver
) -> str:
    """Normalise *document* with the stylesheet registered for *label*.

    Raises ``TransformResourceNotFound`` when *label* (including the empty
    label) has no stylesheet.
    """

    resource = resolver.resolve(label)
    logger.debug("Applying %s to <%s>", resource.location, document.getroot().tag)
    program = compile_stylesheet(resource)
    return run_stylesheet(program, document, label=label)


__all__ = ["compile_stylesheet", "run_stylesheet", "apply"]
