import matplotlib.pyplot as plt
from matplotlib.patches import FancyBboxPatch
import os

os.makedirs("docs/figures", exist_ok=True)

fig, ax = plt.subplots(figsize=(11, 6))

# Block positions (x, y, w, h)
ff_pos = (0.25, 0.62, 0.16, 0.09)
ffb_pos = (0.25, 0.48, 0.16, 0.09)
pi_pos = (0.25, 0.30, 0.16, 0.09)
d_pos = (0.55, 0.12, 0.16, 0.09)
plant_pos = (0.72, 0.30, 0.16, 0.09)
err_pos = (0.12, 0.33, 0.03, 0.03)
sum_pos = (0.55, 0.33, 0.03, 0.03)


def block(pos, text, colour):
    ax.add_patch(FancyBboxPatch((pos[0], pos[1]), pos[2], pos[3], boxstyle="round,pad=0.02", ec="black", fc=colour))
    ax.text(pos[0] + pos[2] / 2, pos[1] + pos[3] / 2, text, ha="center", va="center")


def junction(pos, text):
    centre = (pos[0] + pos[2] / 2, pos[1] + pos[3] / 2)
    ax.add_patch(plt.Circle(centre, 0.02, ec="black", fc="white"))
    ax.text(centre[0], centre[1], text, ha="center", va="center")
    return centre


def arrow(start, end, label=""):
    ax.annotate("", xy=end, xytext=start, arrowprops=dict(arrowstyle="->", lw=1.5))
    if label:
        ax.text((start[0] + end[0]) / 2, (start[1] + end[1]) / 2 + 0.015, label, ha="center", fontsize=8)


block(ff_pos, "Feedforward\n(1-α)Kff·Δr", "lightgreen")
block(ffb_pos, "FF boost\n(1-β)Kffb·Δ²r", "palegreen")
block(pi_pos, "P + I\n(anti-windup)", "lightcoral")
block(d_pos, "Kd·Δy", "lightyellow")
block(plant_pos, "Plant", "lightblue")
err = junction(err_pos, "-")
total = junction(sum_pos, "+")

arrow((0.02, err[1]), (err[0] - 0.02, err[1]), "r")
arrow((0.06, err[1]), (ff_pos[0], ff_pos[1] + ff_pos[3] / 2))
arrow((0.06, err[1]), (ffb_pos[0], ffb_pos[1] + ffb_pos[3] / 2))
arrow((err[0] + 0.02, err[1]), (pi_pos[0], pi_pos[1] + pi_pos[3] / 2), "e")
arrow((ff_pos[0] + ff_pos[2], ff_pos[1] + ff_pos[3] / 2), (total[0], total[1] + 0.02))
arrow((ffb_pos[0] + ffb_pos[2], ffb_pos[1] + ffb_pos[3] / 2), (total[0], total[1] + 0.02))
arrow((pi_pos[0] + pi_pos[2], pi_pos[1] + pi_pos[3] / 2), (total[0] - 0.02, total[1]))
arrow((total[0] + 0.02, total[1]), (plant_pos[0], plant_pos[1] + plant_pos[3] / 2), "u (clamped)")
arrow((plant_pos[0] + plant_pos[2] / 2, plant_pos[1]), (d_pos[0] + d_pos[2], d_pos[1] + d_pos[3] / 2), "y")
arrow((d_pos[0] + d_pos[2] / 2, d_pos[1] + d_pos[3]), (total[0], total[1] - 0.02), "-")
arrow((d_pos[0], d_pos[1] + d_pos[3] / 2), (err[0], err[1] - 0.02), "y")

ax.set_xlim(0, 1)
ax.set_ylim(0, 0.8)
ax.set_axis_off()
plt.savefig("docs/figures/ffpid_diagram.png", dpi=300, bbox_inches="tight")
plt.close()
