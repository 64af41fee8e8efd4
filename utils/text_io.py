def parse_sequence(txt: str) -> str:
    # FASTA: skip '>' header and ';' comment lines, join the rest
    lines = [ln.strip() for ln in txt.splitlines()]
    return "".join(ln for ln in lines if ln and not ln.startswith((">", ";"))).upper()


def read_files_as_sequences(files):
    seqs, names = [], []
    if not files:
        return seqs, names
    for f in files:
        data = f.read()
        try:
            txt = data.decode("utf-8", errors="ignore")
        except AttributeError:
            txt = str(data)
        seqs.append(parse_sequence(txt))
        names.append(getattr(f, "name", "uploaded.fasta"))
    return seqs, names
