# frontend/table.py

import argparse

from frontend.config import load_config


def generate_table_html(base_url: str, rows: int, cols: int) -> str:
    """
    Build the <table> that embeds the board in a README or web page.

    The first row links the status face to the reset route; every following
    row holds one linked image per cell.
    """
    base_url = base_url.rstrip("/")
    lines = [
        '<table id="toc">',
        "  <tr>",
        '    <td align="center">',
        f'      <a href="{base_url}/game/reset"><img src="{base_url}/game/status" width="48px" height="48px" /></a>',
        "    </td>",
        "  </tr>",
    ]
    for r in range(rows):
        lines.append("  <tr>")
        lines.append('    <td align="center">')
        for c in range(cols):
            image_url = f"{base_url}/cell/{r}/{c}/image"
            click_url = f"{base_url}/cell/{r}/{c}/click"
            lines.append(f'      <a href="{click_url}"><img src="{image_url}" width="32px" height="32px" /></a>')
        lines.append("    </td>")
        lines.append("  </tr>")
    lines.append("</table>")
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print the HTML table embedding the board")
    parser.add_argument("--config", type=str, default=None, help="Path to server config yaml")
    parser.add_argument("--base-url", type=str, default=None, help="Public URL of the server")
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--cols", type=int, default=None)
    args = parser.parse_args(argv)

    config = load_config(args.config)
    base_url = args.base_url or config["server"]["base_url"]
    if not base_url:
        parser.error("a base URL is required (--base-url or server.base_url in the config)")
    rows = args.rows if args.rows is not None else config["game"]["rows"]
    cols = args.cols if args.cols is not None else config["game"]["cols"]

    print(generate_table_html(base_url, rows, cols))


if __name__ == "__main__":
    main()
