import sys

import matplotlib.pyplot as plt
import pandas as pd

# Plots the timings collected by figure5.py
filename = sys.argv[1] if len(sys.argv) > 1 else 'data/timing_results.csv'
output = filename.rsplit('.', 1)[0] + '.png'

df = pd.read_csv(filename)
df = df.groupby(['Strategy', 'Number of Active Flows'], as_index=False).mean(numeric_only=True)

fig, ax = plt.subplots(figsize=(6, 4))
for strategy, group in df.groupby('Strategy'):
    group = group.sort_values('Number of Active Flows')
    ax.plot(group['Number of Active Flows'], group['Calculation Time (ms)'], marker='o', label=f'greedy ({strategy})')
construction = df.groupby('Number of Active Flows', as_index=False)['Construction Time (ms)'].mean()
ax.plot(construction['Number of Active Flows'], construction['Construction Time (ms)'], marker='s',
        linestyle='--', label='reverse index')
ax.set_xlabel('Number of Active Flows')
ax.set_ylabel('Time (ms)')
ax.legend()
fig.tight_layout()
fig.savefig(output)
print(f"Plot saved to {output}")
