"""

Command line utility to infer classes from example JSON and generate code for them.

"""


import argparse
import logging
import tempfile
import sys
import os
import json
from json2pojo import _version

ARG_TYPES = {'str': str, 'int': int}


def load_commands():
    """Load the commands from the commands.json file."""
    commands_path = os.path.join(os.path.dirname(__file__), 'commands.json')
    with open(commands_path, 'r', encoding='utf-8') as f:
        return json.load(f)

def create_subparsers(subparsers, commands):
    """Create subparsers for the commands."""
    for command in commands:
        cmd_parser = subparsers.add_parser(command['command'], help=command['description'])
        for arg in command['args']:
            kwargs = {
                'help': arg['help'],
            }
            if 'nargs' in arg:
                kwargs['nargs'] = arg['nargs']
            if 'default' in arg:
                kwargs['default'] = arg['default']
            if arg['type'] == 'bool':
                kwargs['action'] = 'store_true'
            else:
                kwargs['type'] = ARG_TYPES[arg['type']]
            carg = cmd_parser.add_argument(arg['name'], **kwargs)
            if arg['name'].startswith('--'):
                carg.required = arg.get('required', True)

def dynamic_import(module, func):
    """Dynamically import a module and function."""
    mod = __import__(module, fromlist=[func])
    return getattr(mod, func)

def resolve_function_arg(val, args):
    """Resolve a function argument binding from commands.json against the parsed args."""
    negate = val.startswith('not ')
    if negate:
        val = val[4:]
    if not val.startswith('args.'):
        return val
    resolved = getattr(args, val[5:], None)
    return not resolved if negate else resolved

def main():
    """Main function for the command line utility."""
    commands = load_commands()
    parser = argparse.ArgumentParser(description='Infer classes from example JSON and generate code for them.')
    parser.add_argument('--version', action='store_true', help='Print the version of json2pojo.')
    parser.add_argument('--verbose', action='store_true', help='Log progress details.')

    subparsers = parser.add_subparsers(dest='command')
    create_subparsers(subparsers, commands)

    args = parser.parse_args()

    if 'version' in args and args.version:
        print(f'json2pojo {_version.version}')
        return

    if args.command is None:
        parser.print_help()
        return

    logging.basicConfig(level=logging.DEBUG if getattr(args, 'verbose', False) else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    temp_input = None
    try:
        command = next((cmd for cmd in commands if cmd['command'] == args.command), None)
        if not command:
            print(f"Error: Command {args.command} not found.", file=sys.stderr)
            sys.exit(1)

        input_file_path = getattr(args, 'input', None)
        if input_file_path is None:
            temp_input = tempfile.NamedTemporaryFile(delete=False, mode='w', encoding='utf-8', suffix='.json')
            input_file_path = temp_input.name
            temp_input.write(sys.stdin.read())
            temp_input.flush()
            temp_input.close()

        suppress_print = False
        temp_output = None
        output_file_path = ''
        if 'out' in args:
            output_file_path = args.out
            if output_file_path is None:
                suppress_print = True
                temp_output = tempfile.NamedTemporaryFile(delete=False)
                temp_output.close()
                output_file_path = temp_output.name

        def printmsg(s):
            if not suppress_print:
                print(s)

        module_name, func_name = command['function']['name'].rsplit('.', 1)
        func = dynamic_import(module_name, func_name)
        func_args = {}
        for arg, val in command['function']['args'].items():
            if val == 'input_file_path':
                func_args[arg] = input_file_path
            elif val == 'output_file_path':
                if output_file_path:
                    func_args[arg] = output_file_path
            else:
                func_args[arg] = resolve_function_arg(val, args)
        if output_file_path:
            printmsg(f'Executing {command["description"]} with input {input_file_path} and output {output_file_path}')
        func(**func_args)

        if temp_output:
            with open(output_file_path, 'r', encoding='utf-8') as f:
                sys.stdout.write(f.read())
            os.remove(output_file_path)

    except Exception as e:
        print("Error: ", str(e), file=sys.stderr)
        sys.exit(1)
    finally:
        if temp_input:
            try:
                os.remove(temp_input.name)
            except OSError as e:
                print(f"Error: Could not delete temporary input file {temp_input.name}. {e}", file=sys.stderr)

if __name__ == "__main__":
    main()
