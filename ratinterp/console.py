#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Interactive console for interpolating, evaluating and storing polynomials"""

from argparse import ArgumentParser
from typing import List, Optional
import logging
import sys

from .formatting import format_polynomial, format_vector
from .interpolation import evaluate, interpolate, is_unique
from .names import *
from .parsing import chop_command, parse_rational, parse_vector
from .store import PolynomialStore

__all__ = ['PolynomialConsole', 'main']

LOG = logging.getLogger(__name__)

BANNER = "ratinterp, an exact polynomial interpolator. Type 'help' for more information."

HELP_TEXT = """help -- show the command list.
itrp (x1 x2 ... xn) (y1 y2 ... yn) -- calculate a polynomial, which is evaluated y1, y2, ... yn when x=x1, x2, ..., xn.
eval (a0 a1 ... an) x -- evaluate the polynomial a0+a1*x+a2*x^2+...+an*x^n.
ls -- list all polynomials stored in the map.
print (a0 a1 ... an) -- print a polynomial.
add name (a0 a1 ... an) -- add a named polynomial in the map.
rn old-name new-name -- rename a polynomial in the map.
rm name -- remove a polynomial from the map.
quit -- leave the console.
NOTE: names in the map can be used as vectors."""


class PolynomialConsole:
    """Line based console on top of the interpolation core

    Each input line is split with chop_command. The first argument selects the command,
    vectors are given as literals '(1 2 3/4)' or as names of stored polynomials. Errors in
    user input are reported on the output stream and never end the session.

    Example:
        console = PolynomialConsole()
        console.execute('itrp (1 2 3) (2 4 6)')

    Args:
        store (optional (PolynomialStore)):
            Storage for named polynomials. A new, empty store is used by default.

        out (optional (file-like)): (Default: sys.stdout)
            Stream that receives all console output.

        prompt (optional (str)): (Default: '>>')
            Input prompt shown by run().

        name_prefix (optional (str)): (Default: 'p')
            Prefix for automatically named results when no store is passed.
    """

    def __init__(self, store: Optional[PolynomialStore] = None, out=None, **kwargs):
        allowed_keys = {PROMPT, NAME_PREFIX}
        for key in kwargs:
            if key not in allowed_keys:
                raise Exception("Key " + key + " is not supported.")
        self.prompt = kwargs.get(PROMPT, DEFAULT_PROMPT)
        if store is None:
            store = PolynomialStore(kwargs.get(NAME_PREFIX, DEFAULT_NAME_PREFIX))
        self.polys = store
        self.out = out if out is not None else sys.stdout
        self.commands = {
            HELP: self._help,
            ITRP: self._itrp,
            EVAL: self._eval,
            LS: self._ls,
            PRINT: self._print,
            ADD: self._add,
            RN: self._rn,
            RM: self._rm,
        }

    def _write(self, text: str = '') -> None:
        self.out.write(text + '\n')

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False once the user asks to quit."""
        cmd = chop_command(line)
        if not cmd:
            return True
        if cmd[0] == QUIT:
            return False
        if cmd[0] not in self.commands:
            self._write("Unknown command '" + cmd[0] + "'.")
            return True
        LOG.info('Running command %s', cmd[0])
        try:
            self.commands[cmd[0]](cmd)
        except (ValueError, ZeroDivisionError) as e:
            self._write(str(e))
        return True

    def run(self, stream=None) -> None:
        """Read and execute commands until 'quit' or end of input."""
        if stream is None:
            stream = sys.stdin
        self._write(BANNER)
        while True:
            self.out.write(self.prompt)
            self.out.flush()
            line = stream.readline()
            if not line:
                self._write()
                break
            if not self.execute(line):
                break

    def _enough(self, cmd: List[str], num: int) -> bool:
        if len(cmd) < num:
            self._write('not enough arguments!')
            return False
        return True

    def _help(self, cmd: List[str]) -> None:
        self._write(HELP_TEXT)

    def _itrp(self, cmd: List[str]) -> None:
        if not self._enough(cmd, 3):
            return
        xs = parse_vector(cmd[1], self.polys)
        if not xs:
            self._write('xs should not be empty.')
            return
        if not is_unique(xs):
            self._write('all xs should be unique.')
            return
        ys = parse_vector(cmd[2], self.polys)
        if len(xs) != len(ys):
            self._write('xs and ys should be in the same length.')
            return
        res = interpolate(xs, ys)
        self._write(format_vector(res))
        name = self.polys.save(res)
        self._write("saved as '" + name + "' in map.")

    def _eval(self, cmd: List[str]) -> None:
        if not self._enough(cmd, 3):
            return
        coeffs = parse_vector(cmd[1], self.polys)
        x = parse_rational(cmd[2])
        self._write(str(evaluate(coeffs, x)))

    def _ls(self, cmd: List[str]) -> None:
        for name, vec in self.polys:
            self._write(name + ': ' + format_vector(vec))

    def _print(self, cmd: List[str]) -> None:
        if not self._enough(cmd, 2):
            return
        self._write(format_polynomial(parse_vector(cmd[1], self.polys)))

    def _add(self, cmd: List[str]) -> None:
        if not self._enough(cmd, 3):
            return
        vec = parse_vector(cmd[2], self.polys)
        self._write(cmd[1] + ': ' + format_vector(vec))
        self.polys.add(cmd[1], vec)

    def _rn(self, cmd: List[str]) -> None:
        if not self._enough(cmd, 3):
            return
        if cmd[1] not in self.polys:
            self._write('unknown name.')
            return
        vec = self.polys.rename(cmd[1], cmd[2])
        self._write(cmd[2] + ': ' + format_vector(vec))

    def _rm(self, cmd: List[str]) -> None:
        if not self._enough(cmd, 2):
            return
        if cmd[1] not in self.polys:
            self._write('unknown name.')
            return
        self.polys.remove(cmd[1])


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point of the ratinterp console"""
    parser = ArgumentParser(prog='ratinterp', description='Exact rational polynomial interpolation console.')
    parser.add_argument('--log-level',
                        default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='logging level (default: WARNING)')
    parser.add_argument('--prompt', default=DEFAULT_PROMPT, help="input prompt (default: '>>')")
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format='%(levelname)s: %(message)s')
    PolynomialConsole(prompt=args.prompt).run()
    return 0
