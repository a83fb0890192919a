import argparse
import os
import re

# Constants
MAX_CHARS = 100000
ROOT = os.path.dirname(os.path.abspath(__file__))

# Dependency order: every module only uses names defined above it
MODULE_ORDER = [
    "config.py",
    "pilot/errors.py",
    "pilot/geometry.py",
    "pilot/course.py",
    "pilot/pod.py",
    "pilot/steering.py",
    "pilot/progress.py",
    "pilot/thrust.py",
    "pilot/collision.py",
    "pilot/decision.py",
    "pilot/log.py",
    "pilot/protocol.py",
    "bot.py",
]

LOCAL_IMPORT = re.compile(r"^(from\s+(config|pilot(\.\w+)*)\s+import\b|import\s+(config|pilot)\b)")

HEADER = """# Pod racing pilot, single-file submission.
# Generated by export.py from config.py, pilot/ and bot.py. Do not edit.
"""

def strip_local_imports(source):
    """
    Drop imports of project modules; once everything lives in one file the
    imported names are already defined above. `if TYPE_CHECKING:` blocks
    only hold such imports and go too.
    """
    out = []
    in_block = False
    in_type_checking = False
    for line in source.splitlines():
        if in_block:
            if ")" in line:
                in_block = False
            continue
        if in_type_checking:
            if line.startswith((" ", "\t")) or not line.strip():
                continue
            in_type_checking = False
        if line.startswith("if TYPE_CHECKING:"):
            in_type_checking = True
            continue
        if LOCAL_IMPORT.match(line):
            if "(" in line and ")" not in line:
                in_block = True
            continue
        out.append(line)
    return "\n".join(out).strip("\n")

def bundle(root=ROOT):
    parts = [HEADER]
    for rel in MODULE_ORDER:
        with open(os.path.join(root, rel), 'r') as f:
            source = f.read()
        parts.append(f"# {'-' * 10} {rel} {'-' * 10}\n{strip_local_imports(source)}\n")
    return "\n".join(parts)

def export_submission(output_path="submission.py", root=ROOT):
    script = bundle(root)

    with open(output_path, 'w') as f:
        f.write(script)

    print(f"Exported to {output_path} ({len(MODULE_ORDER)} modules, {len(script)} chars)")
    if len(script) > MAX_CHARS:
        print(f"WARNING: submission exceeds the {MAX_CHARS} character limit!")
    return output_path

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--out", type=str, default="submission.py")
    args = parser.parse_args()

    export_submission(args.out)

if __name__ == "__main__":
    main()
