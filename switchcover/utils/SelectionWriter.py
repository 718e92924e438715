import os


def write_selected_switches(chosen: list[bool], filename: str) -> int:
    """Writes the ids of the chosen switches, one per line in ascending order. Returns how many were written."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    count = 0
    with open(filename, 'w', encoding='utf-8') as f:
        for switch_id, selected in enumerate(chosen):
            if selected:
                f.write(f'{switch_id}\n')
                count += 1
    return count


def read_selected_switches(filename: str) -> list[int]:
    with open(filename, 'r', encoding='utf-8') as f:
        return [int(line) for line in f if line.strip()]
