import os
import sys

PATHS = 'pyguild tests dev'

if __name__ == '__main__':
    executable = 'py' if sys.platform == 'win32' else 'python'
    format_command = f'{executable} -m ruff format {PATHS}'
    check_command = f'{executable} -m ruff check {PATHS}'

    if os.system(format_command) != 0:
        sys.exit(1)
    if os.system(check_command) != 0:
        print(f'Linting failed, please run "{check_command} --fix" to fix them automatically.')
        sys.exit(1)
