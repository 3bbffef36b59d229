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
"""Static strings used in the ratinterp package

    Console commands

        HELP = 'help'

        ITRP = 'itrp'

        EVAL = 'eval'

        LS = 'ls'

        PRINT = 'print'

        ADD = 'add'

        RN = 'rn'

        RM = 'rm'

        QUIT = 'quit'

    Console setup

        PROMPT = 'prompt'

        NAME_PREFIX = 'name_prefix'

    Plotting

        XS = 'xs'

        YS = 'ys'

        X_RANGE = 'x_range'

        POINTS = 'points'

        PLT_BACKEND = 'plt_backend'

        SHOW = 'show'
"""

# Console commands
HELP = 'help'
ITRP = 'itrp'
EVAL = 'eval'
LS = 'ls'
PRINT = 'print'
ADD = 'add'
RN = 'rn'
RM = 'rm'
QUIT = 'quit'

# Console setup
PROMPT = 'prompt'
NAME_PREFIX = 'name_prefix'
DEFAULT_PROMPT = '>>'
DEFAULT_NAME_PREFIX = 'p'

# Plotting
XS = 'xs'
YS = 'ys'
X_RANGE = 'x_range'
POINTS = 'points'
PLT_BACKEND = 'plt_backend'
SHOW = 'show'
