"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.

Units: world pixels, and "frames" at the 60 FPS reference rate.
Velocities are pixels per reference frame.
"""

# =============================================================================
# TIMING
# =============================================================================
REFERENCE_FPS = 60
REFERENCE_FRAME_MS = 1000.0 / REFERENCE_FPS
MAX_DELTA_MULTIPLIER = 3.0    # long frames are capped to keep integration stable

# =============================================================================
# VIEWPORT / WORLD
# =============================================================================
VIEWPORT_WIDTH = 800
VIEWPORT_HEIGHT = 600
GROUND_OFFSET = 50            # ground line sits this far above the viewport bottom
LEVEL_WIDTH_SCREENS = 3       # finite level width in viewports

# =============================================================================
# ROCK PHYSICS
# =============================================================================
BASE_RADIUS = 20.0
GRAVITY = 0.5
JUMP_FORCE = -12.0
MOVE_SPEED = 0.8              # horizontal acceleration per frame (grounded)
AIR_CONTROL = 0.5             # acceleration multiplier while airborne
MAX_SPEED_X = 8.0
GROUND_FRICTION = 0.90
ROTATION_FACTOR = 0.05
ROTATION_FRICTION = 0.98
STOP_THRESHOLD = 0.1
HARD_LANDING_SPEED = 3.0      # vertical speed above which a landing bounces
LANDING_RESTITUTION = 0.3
LANDING_SPIN = 0.1
WALL_RESTITUTION = 0.5
WALL_SPIN_REVERSAL = -0.8

ROCK_OUTLINE_POINTS = 12

# =============================================================================
# HEALTH
# =============================================================================
BASE_HEALTH = 100.0
DAMAGE_FLASH_FRAMES = 10
IMMUNITY_FRAMES = 30

# =============================================================================
# PROGRESSION
# =============================================================================
XP_TO_FIRST_LEVEL = 100
XP_GROWTH = 1.5
SIZE_PER_LEVEL = 0.05         # radius grows 5% per level
SURVIVAL_XP_PER_FRAME = 0.1
MAX_WORLD_LEVEL = 3

# =============================================================================
# HAZARDS
# =============================================================================
SPIKE_WIDTH = 30.0
SPIKE_HEIGHT = 20.0
SPIKE_DAMAGE = 20.0
SPIKE_BOUNCE_FACTOR = 0.7     # vy = JUMP_FORCE * factor
SPIKE_KNOCKBACK_X = 8.0

PLATFORM_HEIGHT = 20.0

# =============================================================================
# STAR (collectible)
# =============================================================================
STAR_SIZE = 15.0
STAR_SPEED = 3.0
STAR_SPIN = 0.1
STAR_EDGE_MARGIN = 20.0
STAR_TRAIL_LENGTH = 20
STAR_TRAIL_LIFE = 20
STAR_XP_REWARD = 100.0
STAR_RESPAWN_FRAMES = 180
STAR_MIN_SPAWN_DISTANCE = 100.0
STAR_SPAWN_PADDING = 40.0
STAR_SPAWN_ATTEMPTS = 50

# =============================================================================
# MINERS (NPC)
# =============================================================================
MINER_WIDTH = 30.0
MINER_HEIGHT = 50.0
MINER_WALK_SPEED = 1.0
MINER_HEALTH = 30.0
MINER_TURN_CHANCE = 0.005     # per-frame probability of flipping direction
MINER_ATTACK_RANGE = 60.0
MINER_ATTACK_DAMAGE = 15.0
MINER_ATTACK_COOLDOWN = 90    # frames
MINER_ATTACK_DURATION = 30    # frames
MINER_KNOCKBACK = 10.0
MINER_XP_REWARD = 25.0
STOMP_DAMAGE = 15.0
STOMP_BOUNCE_FACTOR = 0.6

# =============================================================================
# PROCEDURAL GENERATION
# =============================================================================
GENERATION_STEP = 400.0
LOOK_AHEAD = 1200.0
CLEANUP_DISTANCE = 2000.0
MAX_GENERATION_ITERATIONS = 50
SEGMENT_MARGIN = 10.0         # entities stay this far inside their segment
MAX_PLATFORMS_PER_SEGMENT = 2
PLATFORM_MIN_WIDTH = 100.0
PLATFORM_MAX_WIDTH = 220.0
PLATFORM_MIN_RISE = 100.0     # platform top height above the ground line
PLATFORM_MAX_RISE = 300.0
PLATFORM_SPIKE_CHANCE = 0.3
GROUND_SPIKE_CHANCE = 0.4
MINER_BASE_CHANCE = 0.15
MINER_CHANCE_PER_WORLD = 0.1
MINER_MAX_CHANCE = 0.6
SPAWN_SAFE_RADIUS = 200.0

# =============================================================================
# CAMERA
# =============================================================================
CAMERA_SMOOTHING = 0.1

# =============================================================================
# EFFECTS
# =============================================================================
EVOLUTION_PARTICLES = 20
EVOLUTION_PARTICLE_SPEED = 3.0
EVOLUTION_PARTICLE_LIFE = 60
COLLECT_PARTICLES = 30
COLLECT_PARTICLE_LIFE = 60
SPARK_PARTICLES = 8
SPARK_PARTICLE_LIFE = 20
CELEBRATION_PARTICLES = 50
ROCK_BREAK_PIECES = 8
ROCK_PIECE_SPEED = 5.0
ROCK_PIECE_GRAVITY = 0.2
ROCK_PIECE_SPIN = 0.1
ROCK_PIECE_LIFE = 120
PARTICLE_POOL_CAPACITY = 64
INTERSTITIAL_FRAMES = 180
