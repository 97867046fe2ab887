# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

# NOTE: This file only runs the development server for the Flask app defined in
# portfolio/__init__.py. Production runs under gunicorn (see gunicorn.conf.py).

import argparse
import os

def main():
    parser = argparse.ArgumentParser(
        prog = "portfolio",
        description = "Run the portfolio site with the Flask development server."
    )
    parser.add_argument("--host", type=str, default="0.0.0.0", help="Interface to bind (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on (default: 8000)")
    parser.add_argument("--theme", type=str, default=None, help="Default theme (default: from PORTFOLIO_THEME)")
    args = parser.parse_args()

    if args.theme:
        # read by portfolio.config at import time
        os.environ["PORTFOLIO_THEME"] = args.theme

    from portfolio import app
    app.run(args.host, args.port, debug=True)

if __name__ == "__main__":
    main()
