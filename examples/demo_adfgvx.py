"""
adfgvx: Live Demo, Stage by Stage
=================================
Run:  python examples/demo_adfgvx.py

Walks one message through both stages of the cipher and back,
printing the intermediate symbol stream, the column layout and timings.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from adfgvx import ADFGVXCipher, get_square
from adfgvx.stages.stage2_transposition import distribute, transpose

LINE = "═" * 70
KEY  = "SEMB2025"
MSG  = "ATTACK AT DAWN, HOLD THE RIDGE."

def header(stage, name):
    print(f"\n{LINE}")
    print(f"  Stage {stage}: {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

print(f"\n{LINE}")
print("  adfgvx: Substitution + Transposition Demo")
print(LINE)
print(f"  Key:     {KEY}")
print(f"  Message: {MSG}\n")

cipher = ADFGVXCipher(KEY, square="punctuated")

# ── STAGE 1 ──────────────────────────────────────────────────────────────────
header(1, "SUBSTITUTION (punctuated Polybius square)")
for line in str(get_square("punctuated")).splitlines():
    print("    " + line)
stream = cipher.substitute(MSG)
ok("Symbol pairs", " ".join(stream[i:i + 2] for i in range(0, 24, 2)) + " ...")
ok("Stream length", f"{len(stream)} symbols")

# ── STAGE 2 ──────────────────────────────────────────────────────────────────
header(2, "TRANSPOSITION (keyed columnar)")
cols = distribute(stream, len(KEY))
ok("Key order", str(cipher.key_order))
for ch, col in zip(KEY, cols):
    print(f"     {ch} | {''.join(col)}")
print("  After sorting the key:")
for ch, col in zip(sorted(KEY), transpose(cols, KEY)):
    print(f"     {ch} | {''.join(col)}")

# ── ROUND TRIP ───────────────────────────────────────────────────────────────
header("1+2", "ROUND TRIP")
t0 = time.perf_counter()
ct = cipher.encrypt(MSG)
pt = cipher.decrypt(ct)
elapsed = time.perf_counter() - t0
ok("Ciphertext", ct[:40] + "...")
ok("Decrypted",  pt)
ok("Round-trip", f"{elapsed*1000:.3f} ms")

long_msg = "A" * 2559
t0 = time.perf_counter()
ADFGVXCipher("CHAVE123").encrypt(long_msg)
ok("2559 chars, 8-char key", f"{(time.perf_counter() - t0)*1000:.2f} ms")

print(f"\n{LINE}\n")
