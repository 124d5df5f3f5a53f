# jumpparticles

A small 2D particle simulation drawn with pygame. Coloured balls are spawned
at a fixed interval. They fall under gravity, bounce off the window edges and
slide to a stop on the floor. They also collide elastically with each other,
and their masses follow their size.

The package builds the simulation up in numbered stages. Stages 1 to 7 go from
an empty window to colliding particles. Stages 8 to 10 add on-screen buttons
and then a magnet.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Running

    jumpparticles

This opens a resizable 720×480 window titled "Jump Particles" and runs stage
10 at up to 60 frames per second. The following options are available:

- `--stage {8,9,10}` chooses the stage. The default is 10.
- `--title TEXT` sets the window title.
- `--width N` and `--height N` set the initial window size.
- `--fps N` sets the frame rate limit.

The buttons sit at the top right of the window and move with it when it is
resized.

- **Reset** removes every particle and starts spawning again from the
  beginning, with the initial gravity and spawn position. In stage 10 it also
  forgets the particles queued with +10 and +100.
- **Clear** removes the particles on screen. Particles still due to spawn
  keep coming.
- **Positive Gravity**, **Disable Gravity** and **Negative Gravity** change
  gravity for new and existing particles. These buttons are in stages 9 and 10
  only. With negative gravity, new particles spawn near the bottom of the
  window. In stage 10 they are also launched upwards, against gravity.
- **+10** and **+100** queue more particles to spawn. These buttons are in
  stages 9 and 10 only.
- In stage 10, holding the left mouse button pulls particles within reach
  towards the pointer. The window there cannot be made smaller than its
  initial size.

Stage 8 has only the Reset and Clear buttons. Labels are drawn with pygame's
default font.

Stages 1 to 7 have no command. Run them from Python:

```python
from jumpparticles.early_games import EarlyGame

EarlyGame(5).run()
```

- 1: an empty window
- 2: one ball that stays where it is
- 3: one ball falling freely, with no walls
- 4: one ball bouncing off the walls
- 5: a stream of bouncing balls
- 6: collisions between balls of equal mass
- 7: collisions where each ball's mass follows its size

## Using the pieces

The simulation does not need a window. Each part can be stepped and checked
on its own:

- `jumpparticles.particle`
  - `Particle` moves one ball with semi-implicit Euler steps and bounces it
    off the walls of an `Area`.
  - `ParticleRules` holds the restitution, ground friction and resting
    thresholds.
- `jumpparticles.physics`
  - `PhysicsSolver` checks every pair of particles once.
  - `solve_penetration` moves an overlapping pair apart.
  - `solve_collision` exchanges momentum between a pair, with or without their
    masses. It raises `ValueError` for particles at the same position.
- `jumpparticles.particle_system`
  - `ParticleSystem` spawns particles on a timer until a target count is
    reached, then updates them. It has `set_gravity`, `set_spawn_position`,
    `add_particles_to_spawn`, `reset` and `clear`.
  - `SpawnRules` sets the size, colour, launch speed and reset behaviour of
    new particles.
- `jumpparticles.magnet`
  - `Magnet` pulls particles within reach towards a given point.
- `jumpparticles.button`
  - `Button` is a labelled rectangle. It runs a callback when it is
    left-clicked.
- `jumpparticles.early_particles`
  - `StaticParticle` and `FreeParticle` are the balls of the first stages.
  - `bouncing_particle` builds the ball of stage 4.
- `jumpparticles.early_games`
  - `EarlyGame` runs stages 1 to 7.
- `jumpparticles.game`
  - `Game` runs stages 8 to 10.
  - `button_layout` gives the position and size of each button.
  - `main` is the command line entry point.

For example:

```python
import random
from jumpparticles.particle import Area
from jumpparticles.particle_system import ParticleSystem
from jumpparticles.physics import PhysicsSolver

system = ParticleSystem(10, 0.15, (39.0, 30.0), (0.0, 273.0), Area(720, 480),
                        rng=random.Random(1))
solver = PhysicsSolver(system.particles)
for _ in range(600):
    system.update(1 / 960)
    solver.update(1 / 960)
print(len(system.particles))
```