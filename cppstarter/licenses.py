# cppstarter/licenses.py
"""
LICENSE file bodies.

MIT and BSD-3-Clause are built in. Apache-2.0 is downloaded from
apache.org at generation time, which makes it the only artifact that needs
network access. Year and copyright-holder placeholders are substituted after
the body has been obtained.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

import requests

from cppstarter.definitions import APACHE_LICENSE_URL, DEFAULT_IDENTITY, LICENSE_FETCH_TIMEOUT
from cppstarter.errors import LicenseFetchError
from cppstarter.log_manager import get_logger
from cppstarter.project_spec import Environment

__all__ = [
    "fetch_license_text",
    "render_license",
    "substitute_placeholders",
]

logger = get_logger(__name__)

Fetcher = Callable[[str], str]

YEAR_PLACEHOLDERS = ("[year]", "[yyyy]")
NAME_PLACEHOLDERS = ("[fullname]", "[name of copyright owner]")


def _mit_lines() -> List[str]:
    return [
        "MIT License",
        "",
        "Copyright (c) [year] [fullname]",
        "",
        "Permission is hereby granted, free of charge, to any person obtaining a copy",
        'of this software and associated documentation files (the "Software"), to deal',
        "in the Software without restriction, including without limitation the rights",
        "to use, copy, modify, merge, publish, distribute, sublicense, and/or sell",
        "copies of the Software, and to permit persons to whom the Software is",
        "furnished to do so, subject to the following conditions:",
        "",
        "The above copyright notice and this permission notice shall be included in all",
        "copies or substantial portions of the Software.",
        "",
        'THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR',
        "IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,",
        "FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE",
        "AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER",
        "LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,",
        "OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE",
        "SOFTWARE.",
    ]


def _bsd3_lines() -> List[str]:
    return [
        "BSD 3-Clause License",
        "",
        "Copyright (c) [year], [fullname]",
        "",
        "Redistribution and use in source and binary forms, with or without",
        "modification, are permitted provided that the following conditions are met:",
        "",
        "1. Redistributions of source code must retain the above copyright notice, this",
        "   list of conditions and the following disclaimer.",
        "",
        "2. Redistributions in binary form must reproduce the above copyright notice,",
        "   this list of conditions and the following disclaimer in the documentation",
        "   and/or other materials provided with the distribution.",
        "",
        "3. Neither the name of the copyright holder nor the names of its",
        "   contributors may be used to endorse or promote products derived from",
        "   this software without specific prior written permission.",
        "",
        'THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"',
        "AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE",
        "IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE",
        "DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE",
        "FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL",
        "DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR",
        "SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER",
        "CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,",
        "OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE",
        "OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.",
    ]


BUILTIN_LICENSES: Dict[str, str] = {
    "MIT": "\n".join(_mit_lines()) + "\n",
    "BSD-3-Clause": "\n".join(_bsd3_lines()) + "\n",
}


def fetch_license_text(url: str) -> str:
    """Download a license body.

    Raises
    ------
    LicenseFetchError
        On any network or HTTP error.
    """
    logger.info("downloading license text from %s", url)
    try:
        response = requests.get(url, timeout=LICENSE_FETCH_TIMEOUT)
        response.raise_for_status()
    except requests.exceptions.RequestException as exc:
        raise LicenseFetchError(f"Could not download {url}: {exc}") from exc
    return response.text


def substitute_placeholders(body: str, env: Environment) -> str:
    """Replace year and copyright-holder placeholders in ``body``.

    Without a configured identity the holder becomes ``DEFAULT_IDENTITY``.
    """
    holder = env.identity_name.strip() or DEFAULT_IDENTITY
    for token in YEAR_PLACEHOLDERS:
        body = body.replace(token, str(env.year))
    for token in NAME_PLACEHOLDERS:
        body = body.replace(token, holder)
    return body


def render_license(
    license_type: str,
    env: Environment,
    fetch: Fetcher = fetch_license_text,
) -> Optional[str]:
    """Return the LICENSE text for ``license_type``.

    Returns None for a license this tool does not know; the caller then
    writes no LICENSE file.
    """
    if license_type == "Apache-2.0":
        body = fetch(APACHE_LICENSE_URL)
    elif license_type in BUILTIN_LICENSES:
        body = BUILTIN_LICENSES[license_type]
    else:
        logger.warning("unknown license '%s', no LICENSE file written", license_type)
        return None
    return substitute_placeholders(body, env)
