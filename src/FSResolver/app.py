"""Streamlit UI for FSResolver."""

from __future__ import annotations

import os

import streamlit as st

from FSResolver.file_types import parse_name_input
from FSResolver.formatting import format_elapsed, format_size
from FSResolver.models import DEFAULT_IGNORED_NAMES, OutputFormat, ScanSettings
from FSResolver.output_writer import OutputWriteError
from FSResolver.resolver import resolve
from FSResolver.tree_builder import RootUnreadableError

_MIME_TYPES: dict[OutputFormat, str] = {
    OutputFormat.TEXT: "text/plain",
    OutputFormat.MARKDOWN: "text/markdown",
    OutputFormat.JSON: "application/json",
}

_PREVIEW_LANGUAGES: dict[OutputFormat, str] = {
    OutputFormat.TEXT: "text",
    OutputFormat.MARKDOWN: "markdown",
    OutputFormat.JSON: "json",
}

_PREVIEW_MAX_LINES = 1000


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def _qp_formats() -> list[OutputFormat]:
    raw = parse_name_input(_qp("formats", OutputFormat.TEXT.value))
    known = {f.value: f for f in OutputFormat}
    return [known[name] for name in raw if name in known] or [OutputFormat.TEXT]


def main() -> None:
    st.set_page_config(
        page_title="FSResolver",
        page_icon="📂",
        layout="wide",
    )

    # --- Header with settings popover ---
    header_left, header_right = st.columns([8, 1])
    with header_left:
        st.title("FSResolver")
    with header_right:
        st.markdown("<div style='height: 1.5rem'></div>", unsafe_allow_html=True)
        with st.popover("", use_container_width=True):
            st.subheader("Settings")

            include_dotfiles = st.checkbox(
                "Include dotfiles",
                value=_qp("dotfiles") in ("1", "true"),
                help="Entries whose name starts with '.' are skipped unless this is checked.",
            )
            ignore_raw = st.text_input(
                "Ignored names (comma-separated)",
                value=_qp("ignore", ", ".join(DEFAULT_IGNORED_NAMES)),
                help="Exact entry names to skip, case-insensitive. Matching folders are not descended into.",
            )
            formats = st.multiselect(
                "Output formats",
                options=list(OutputFormat),
                default=_qp_formats(),
                format_func=lambda f: f.value,
            )
            write_files = st.checkbox(
                "Save outputs beside the scanned folder",
                value=False,
            )
            log_entries = st.checkbox(
                "Log every scan decision",
                value=False,
                help="Writes a Scanned/Skipped line per entry to the server log.",
            )

    st.caption("Render a folder as an indented tree with sizes and file-type icons.")

    root = st.text_input(
        "Folder path",
        value=_qp("root"),
        placeholder=os.getcwd(),
        key="root",
    )

    scan_clicked = st.button(
        "Scan",
        type="primary",
        use_container_width=True,
        disabled=not formats,
        key="scan",
    )

    if scan_clicked:
        settings = ScanSettings(
            root=root.strip() or os.getcwd(),
            include_dotfiles=include_dotfiles,
            ignored_names=tuple(parse_name_input(ignore_raw)),
            output_formats=frozenset(formats),
            log_entries=log_entries,
            write_files=write_files,
        )
        _run_scan(settings)

    # Show previous result after rerun (e.g. download button click)
    if not scan_clicked and "result" in st.session_state:
        _show_result(st.session_state["result"])


def _run_scan(settings: ScanSettings) -> None:
    try:
        with st.spinner("Scanning..."):
            result = resolve(settings)
    except RootUnreadableError as exc:
        st.error(str(exc))
        return
    except OutputWriteError as exc:
        st.error(f"Scan finished but saving failed: {exc}")
        return

    st.session_state["result"] = {
        "root": result.tree.path,
        "size": result.tree.size,
        "scanned_nodes": result.scanned_nodes,
        "elapsed_ms": result.elapsed_ms,
        "outputs": {f.value: text for f, text in result.outputs.items()},
        "written": result.written,
    }
    _show_result(st.session_state["result"])


def _show_result(result: dict) -> None:
    """Display summary, download buttons and previews from a stored result."""
    st.info(
        f"{result['root']}: {format_size(result['size'])}, "
        f"{result['scanned_nodes']:,} entries scanned in "
        f"{format_elapsed(result['elapsed_ms'])}."
    )
    for path in result["written"]:
        st.success(f"Saved {path}")

    for value, text in result["outputs"].items():
        output_format = OutputFormat(value)
        st.download_button(
            label=f"Download {output_format.filename}",
            data=text,
            file_name=output_format.filename,
            mime=_MIME_TYPES[output_format],
            use_container_width=True,
            key=f"download-{value}",
        )

        preview_lines = text.split("\n")
        with st.expander(f"Preview ({value})", expanded=output_format is OutputFormat.TEXT):
            language = _PREVIEW_LANGUAGES[output_format]
            if len(preview_lines) > _PREVIEW_MAX_LINES:
                st.code("\n".join(preview_lines[:_PREVIEW_MAX_LINES]), language=language)
                st.caption(
                    f"Preview is truncated to {_PREVIEW_MAX_LINES:,} lines "
                    f"(total {len(preview_lines):,} lines). "
                    "Download the file for the full content."
                )
            else:
                st.code(text, language=language)


if __name__ == "__main__":
    main()
